"""Definitions that render the parts of a stub file and whole stub modules as text."""