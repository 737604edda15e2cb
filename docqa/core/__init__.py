"""
Core domain logic: chunking, similarity ranking, prompt assembly and providers.
"""
