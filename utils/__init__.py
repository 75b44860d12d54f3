"""
Pure algorithms with no relation-specific dependencies.

Modules:
    graph           - Connected component extraction
    dag_functionals - DAG operations (topological sort)
    union_find      - Union-Find (disjoint set) data structure
    display         - rich rendering of sets and relations
"""
