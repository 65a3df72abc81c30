"""Extraction, classification, merge and descriptor assembly."""
