"""
handlers/ - Presentation Layer
================================
Telegram bot handlers. Each handler parses the command arguments,
delegates to PokemonService and replies with the result or an error text.
No business logic lives here.
"""
