"""Seatwise booking engine."""
