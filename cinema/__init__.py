"""Cinema catalog service: movies, cast entries and their transactional write path."""
