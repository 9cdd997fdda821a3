"""Service layer — recipe walking and the validate/suite operations."""
