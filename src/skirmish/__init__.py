"""Turn-based combat simulator: battle rules, content loading and a console front-end."""
