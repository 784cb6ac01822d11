"""
Core pipeline logic: chunking, embedding adapters, the evaluation engine
and the error taxonomy.
"""
