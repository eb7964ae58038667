"""Storage, knowledge base and emergency alert services"""
