"""HTTP surface: descriptor routes and the Swagger UI mount."""
