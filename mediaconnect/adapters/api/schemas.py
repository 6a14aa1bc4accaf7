"""
Modeles pydantic des reponses JSON OMDb et TMDB.

Les champs inconnus sont ignores et les champs optionnels absents prennent
leur valeur par defaut (None ou liste vide). Un null JSON a la place d'une
liste est traite comme une liste vide.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ApiPayload(BaseModel):
    """Base des reponses API: champs inconnus ignores, alias acceptes."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


# --- OMDb ---------------------------------------------------------------


class OmdbMovie(ApiPayload):
    title: str = Field(default="", alias="Title")
    year: str = Field(default="", alias="Year")
    imdb_id: str = Field(default="", alias="imdbID")
    poster: Optional[str] = Field(default=None, alias="Poster")


class OmdbSearchResponse(ApiPayload):
    """
    Reponse de GET /?apikey=...&s=...

    OMDb signale l'echec dans le corps: Response vaut "True" ou "False"
    et Error contient le message (ex: "Movie not found!").
    """

    search: list[OmdbMovie] = Field(default_factory=list, alias="Search")
    total_results: Optional[str] = Field(default=None, alias="totalResults")
    response: Optional[str] = Field(default=None, alias="Response")
    error: Optional[str] = Field(default=None, alias="Error")

    @field_validator("search", mode="before")
    @classmethod
    def search_none(cls, value: Any) -> Any:
        return [] if value is None else value

    @property
    def is_success(self) -> bool:
        return self.response == "True"


# --- TMDB ---------------------------------------------------------------


class TmdbFindResult(ApiPayload):
    id: int
    title: Optional[str] = None
    name: Optional[str] = None
    media_type: Optional[str] = None


class TmdbFindResponse(ApiPayload):
    """Reponse de GET /find/{external_id}?external_source=imdb_id."""

    movie_results: list[TmdbFindResult] = Field(default_factory=list)
    tv_results: list[TmdbFindResult] = Field(default_factory=list)

    @field_validator("movie_results", "tv_results", mode="before")
    @classmethod
    def results_none(cls, value: Any) -> Any:
        return [] if value is None else value


class TmdbDetailsResponse(ApiPayload):
    """
    Reponse de GET /{movie|tv}/{id}.

    Un film porte title/release_date, une serie name/first_air_date.
    vote_average est un nombre dans l'API mais est conserve sous forme de texte.
    """

    title: Optional[str] = None
    name: Optional[str] = None
    overview: Optional[str] = None
    release_date: Optional[str] = None
    first_air_date: Optional[str] = None
    vote_average: Optional[str] = None

    @field_validator("vote_average", mode="before")
    @classmethod
    def rating_as_text(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @property
    def display_title(self) -> Optional[str]:
        """Nom de la serie en priorite, sinon titre du film."""
        return self.name or self.title

    @property
    def display_release_date(self) -> Optional[str]:
        """Date de sortie du film, sinon date de premiere diffusion."""
        return self.release_date or self.first_air_date


class TmdbCastEntry(ApiPayload):
    name: str = ""
    character: Optional[str] = None
    profile_path: Optional[str] = None


class TmdbCreditsResponse(ApiPayload):
    """Reponse de GET /{movie|tv}/{id}/credits."""

    cast: list[TmdbCastEntry] = Field(default_factory=list)

    @field_validator("cast", mode="before")
    @classmethod
    def cast_none(cls, value: Any) -> Any:
        return [] if value is None else value


class TmdbProviderEntry(ApiPayload):
    provider_name: str = ""
    logo_path: Optional[str] = None


class TmdbRegionProviders(ApiPayload):
    """Offres d'une region. Seul flatrate (abonnement) est exploite."""

    flatrate: list[TmdbProviderEntry] = Field(default_factory=list)

    @field_validator("flatrate", mode="before")
    @classmethod
    def flatrate_none(cls, value: Any) -> Any:
        return [] if value is None else value


class TmdbWatchProvidersResponse(ApiPayload):
    """Reponse de GET /{movie|tv}/{id}/watch/providers, indexee par code region."""

    results: dict[str, TmdbRegionProviders] = Field(default_factory=dict)

    @field_validator("results", mode="before")
    @classmethod
    def results_none(cls, value: Any) -> Any:
        return {} if value is None else value

    def flatrate_for(self, region: str) -> list[TmdbProviderEntry]:
        region_providers = self.results.get(region)
        return region_providers.flatrate if region_providers else []
