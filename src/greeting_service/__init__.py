"""Greeting service: two static JSON endpoints plus Swagger UI."""
