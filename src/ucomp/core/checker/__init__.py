"""Validation and normalisation steps behind ``uc_setup``."""
