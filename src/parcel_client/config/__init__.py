"""Client configuration: profiles, defaults and environment overrides."""
