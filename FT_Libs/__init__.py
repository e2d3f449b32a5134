"""
FT_Libs - Fauxtoshop Library Modules

This package contains core functionality for the Fauxtoshop project,
organized into specialized sub-packages:

- ImageEditingLib: Pixel grid model, image I/O and the four filter algorithms
- FilterNodesLib: Filter node executors wrapping the algorithms
- PipelineLib: Filter registry, output handling and the headless pipeline
- DisplayLib: Image window and mouse click capture
- ConsoleLib: Interactive console and command line entry point
"""

__version__ = "0.1.0"
