# Application layer - services holding the business rules
