"""Core data models for diagram_grid."""
