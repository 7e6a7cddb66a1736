"""
Pitch Board - Lineup Library

Roster data model, arrow annotations, and geometric hit-testing shared by
the board editor and any other consumer of lineup files.
"""
