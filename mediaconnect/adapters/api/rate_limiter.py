"""
Limiteur de debit a fenetre glissante pour les API externes.

Chaque API (OMDb, TMDB) possede son propre budget: au plus max_requests
requetes sur les window dernieres secondes. Le limiteur conserve les
horodatages des requetes admises et fait patienter l'appelant (par petites
attentes successives) tant que la fenetre est pleine.

Usage:
    limiter = RateLimiter(max_requests=40, window=10.0, name="tmdb")
    await limiter.acquire()
    response = await client.get(url)
"""

import asyncio
import time
from collections import deque
from typing import Awaitable, Callable

from loguru import logger

from mediaconnect.adapters.api.errors import InterruptedWaitError

DEFAULT_POLL_INTERVAL = 0.1


class RateLimiter:
    """
    Limiteur a fenetre glissante partage par tous les appels d'une API.

    acquire() est une section critique unique (asyncio.Lock): purge des
    horodatages expires, verification de la capacite et attente se font sous
    le verrou, donc deux appelants concurrents ne peuvent jamais depasser
    ensemble la limite. Le verrou est garde pendant l'attente: les appelants
    suivants patientent dans l'ordre d'arrivee.

    Il s'agit d'un limiteur par sondage, pas d'un token bucket: une requete
    peut etre admise jusqu'a poll_interval apres la liberation effective
    d'une place dans la fenetre.

    Attributes:
        name: Nom du budget (pour les logs et les erreurs)
        max_requests: Nombre maximum de requetes dans la fenetre
        window: Duree de la fenetre glissante en secondes
        poll_interval: Delai entre deux verifications quand la fenetre est pleine

    Example:
        limiter = RateLimiter(30, 60.0, name="omdb")
        await limiter.acquire()  # attend si 30 requetes dans la derniere minute
    """

    def __init__(
        self,
        max_requests: int,
        window: float,
        name: str = "api",
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        """
        Initialise le limiteur.

        Args:
            max_requests: Nombre maximum de requetes dans la fenetre (> 0)
            window: Duree de la fenetre en secondes (> 0)
            name: Nom du budget pour les logs
            poll_interval: Delai entre deux verifications en secondes (> 0)
            clock: Horloge monotone en secondes (injectable pour les tests)
            sleep: Coroutine d'attente (injectable pour les tests)

        Raises:
            ValueError: Si un parametre numerique n'est pas strictement positif
        """
        if max_requests <= 0:
            raise ValueError(f"max_requests doit etre positif, recu: {max_requests}")
        if window <= 0:
            raise ValueError(f"window doit etre positive, recu: {window}")
        if poll_interval <= 0:
            raise ValueError(f"poll_interval doit etre positif, recu: {poll_interval}")

        self.name = name
        self.max_requests = max_requests
        self.window = float(window)
        self.poll_interval = poll_interval
        self._clock = clock
        self._sleep = sleep
        self._timestamps: deque[float] = deque()
        self._lock = asyncio.Lock()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def _purge(self, now: float) -> None:
        """Retire les horodatages sortis de la fenetre glissante."""
        threshold = now - self.window
        while self._timestamps and self._timestamps[0] < threshold:
            self._timestamps.popleft()

    async def acquire(self) -> None:
        """
        Attend qu'une place se libere dans la fenetre puis la consomme.

        Raises:
            InterruptedWaitError: Si le limiteur est ferme pendant l'attente
        """
        async with self._lock:
            waited = False
            while True:
                if self._closed:
                    raise InterruptedWaitError(self.name)

                now = self._clock()
                self._purge(now)
                if len(self._timestamps) < self.max_requests:
                    self._timestamps.append(now)
                    return

                if not waited:
                    logger.debug(
                        f"Quota {self.name} atteint ({self.max_requests}/{self.window:g}s), attente"
                    )
                    waited = True
                await self._sleep(self.poll_interval)

    def close(self) -> None:
        """
        Ferme le limiteur: les appelants en attente levent InterruptedWaitError.

        L'interruption est cooperative: un appelant en attente s'en apercoit
        au plus tard apres poll_interval.
        """
        self._closed = True
