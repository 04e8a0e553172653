"""Domain layer: records, validators, error taxonomy and service ports."""
