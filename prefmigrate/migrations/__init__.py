"""Preference migration system for prefmigrate.

Tracks the preference version in the store itself and applies upgrade
steps sequentially. Each step is a `PreferenceUpgrade` record registered
in `registry.all_upgrades()`.
"""
