"""Pure domain logic: timeline classification, scoring, caller-side services."""
