"""Ant world grids and their reduction to max flow.

The world package is a consumer of the flow engine: `grid` parses the text
format, `reach` finds the resources each workplace can walk to, and
`reduction` builds the node-split flow network and decodes the result.
"""
