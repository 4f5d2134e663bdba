"""
repositories/ - Data Access Layer
==================================
The PokemonRepository contract and its two implementations: a lock-guarded
in-memory list and a transactional SQL store. Both return Pokemon domain
objects and report failures with the exceptions in `repositories.errors`.
"""
