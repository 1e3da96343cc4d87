"""chainlog test suite.

- test_services.py: passthrough log services
- test_levels.py: severity levels and TRACE registration
- test_service.py: the Service contract
- test_config_loader.py: building services from YAML
- test_logging_config.py: logging setup helpers
- test_errors.py: exception hierarchy
"""
