"""HTTP-facing glue: app factory, dependencies and error mapping."""
