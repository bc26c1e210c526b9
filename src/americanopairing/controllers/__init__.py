"""Controllers coordinating tournament state changes."""
