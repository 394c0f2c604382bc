"""Sheet Bet Analytics."""
