"""Identity domain model: organizations, users and their sessions."""
