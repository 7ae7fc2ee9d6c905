"""Host-side helpers for the NYPD Shooting borough analysis."""
