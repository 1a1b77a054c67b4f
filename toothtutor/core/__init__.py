"""
Core simulation: domain model, reaction pipeline, session state and view model.
"""
