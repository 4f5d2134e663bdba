"""
api/ - HTTP Presentation Layer
==============================
FastAPI routes mapping PokemonService results onto HTTP status codes.
"""
