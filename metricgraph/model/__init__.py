"""Result models returned by graph queries."""
