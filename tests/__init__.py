"""bfh test suite.

Folder taxonomy
- unit/      : Isolated, fast checks of a single module or function.
- property/  : Hypothesis property tests over the public codec API.
"""
