"""Domain layer: bank account entities and enums"""
