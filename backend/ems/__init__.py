"""Employee management backend: accounts, session tokens and employee records."""
