"""Infrastructure adapters: settings, database, repositories, logging."""
