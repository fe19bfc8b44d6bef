"""Domain layer for PetClinic.

This package holds the validation, lookup and update rules for owners and pets.
It is intentionally framework-agnostic: domain logic should be testable without Flask.
Storage is reached through repository objects passed in by the caller.
"""
