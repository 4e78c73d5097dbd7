"""CringeShield: confidence-building speaking practice with 30-day and weekly challenges."""
