"""
Mock OMDb API responses for testing.

Contains realistic responses from the OMDb search endpoint.
These fixtures are used with respx to mock httpx calls in tests.
"""

OMDB_URL = "http://www.omdbapi.com/"

# GET /?apikey=...&s=Batman%20Begins
OMDB_SEARCH_RESPONSE = {
    "Search": [
        {
            "Title": "Batman Begins",
            "Year": "2005",
            "imdbID": "tt0372784",
            "Type": "movie",
            "Poster": "https://m.media-amazon.com/images/M/MV5BODIyMDdhNTgtNDlmOC00MjUxLWE2NDItODA5MTdkNzY3ZTdhXkEyXkFqcGc@._V1_SX300.jpg",
        },
        {
            "Title": "Batman Begins",
            "Year": "2005",
            "imdbID": "tt0483162",
            "Type": "game",
            "Poster": "N/A",
        },
    ],
    "totalResults": "2",
    "Response": "True",
}

# GET /?apikey=...&s=zzzzqqq
OMDB_NOT_FOUND_RESPONSE = {
    "Response": "False",
    "Error": "Movie not found!",
}

# OMDb renvoie aussi Response "False" pour une recherche trop large
OMDB_TOO_MANY_RESPONSE = {
    "Response": "False",
    "Error": "Too many results.",
}

# Reponse incoherente: succes annonce mais aucune liste
OMDB_TRUE_WITHOUT_RESULTS = {
    "Response": "True",
    "totalResults": "0",
}
