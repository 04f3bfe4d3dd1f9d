"""Bounded contexts of ResumeMatch: intake, matching and reporting."""
