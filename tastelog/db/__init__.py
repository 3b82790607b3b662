"""Engine, sessions and schema setup."""
