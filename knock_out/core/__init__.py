"""Game rules, random sources, dice, players and the KnockOutGame engine."""
