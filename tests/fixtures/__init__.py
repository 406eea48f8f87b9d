"""
Test Fixtures - Shared Test Data and Configurations.

    - sample_filings.yaml: Filings for the file-backed provider
    - sample_config.yaml: Sample configuration for testing
"""
