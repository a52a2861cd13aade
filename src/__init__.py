"""Receipt scoring core: models, rules, store, validation."""
