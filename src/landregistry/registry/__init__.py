"""Registry domain models, gazetteer and in-memory stores."""
