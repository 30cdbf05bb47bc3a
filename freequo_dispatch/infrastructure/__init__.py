"""Infrastructure adapters: logging, events, mail, payments, persistence."""
