"""
Predictive HPA Root Module

Predictive horizontal autoscaling core: turns a rolling history of
autoscaling evaluations into forecasted replica counts and merges them
into a single scaling decision.

Layer Structure:
- Domain: Entities, errors, predictors, retention and decision rules
- Application: Use cases and DTOs
- Infrastructure: Evaluation stores, subprocess runner, tuning fetcher
- Presentation: Controllers for the API REST
- Shared: Cross-cutting concerns and shared utilities
- Main: Composition root, application entry point and configuration
"""
