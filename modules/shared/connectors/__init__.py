"""Connectors - externe Datenquellen (Analytics)"""
