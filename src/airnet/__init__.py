"""Airline route planning: cheapest itineraries, spanning trees and budget trips."""

from airnet.airline import AirlineSystem
from airnet.errors import CityNotFoundError
from airnet.models import Itinerary, Route, Schedule

__all__ = ["AirlineSystem", "CityNotFoundError", "Itinerary", "Route", "Schedule"]

__version__ = "0.1.0"
