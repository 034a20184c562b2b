"""
TinyRemap Yarn2Tiny -- Mapping Format Converter
=================================================

Yarn2Tiny converts a yarn v1 mappings file (obfuscated, intermediate and
readable names for classes, fields and methods) into a tiny v1 mappings
file keyed by intermediate names.

Capabilities:
    - Streaming-free, whole-file conversion with row-level warnings
    - JVM field and method descriptor parsing (JVMS 4.3)
    - Rewriting of every class reference to its intermediate name
    - Atomic output writing
    - Console summary and JSON conversion reports

References:
    - Oracle. (2023). The Java Virtual Machine Specification, SE 21.
    - FabricMC. Yarn and tiny mapping formats.
"""

__version__ = "1.0.0"
