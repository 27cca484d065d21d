"""Service layer: adapts the domain to the ServiceResult contract."""
