"""
Integration Tests - Dashboard and Workflow End to End.
"""
