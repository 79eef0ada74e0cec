"""Passenger ridership analysis."""
