"""Teknonym computation for family trees."""
from .models import Person
from .resolver import TeknonymyService, build_teknonym, degree_of_kinship, resolve

__all__ = ["Person", "TeknonymyService", "build_teknonym", "degree_of_kinship", "resolve"]
