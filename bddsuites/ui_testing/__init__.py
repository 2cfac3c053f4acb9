"""UI testing: framework, page objects and BDD scenarios."""
