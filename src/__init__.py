"""
AirscrewPerformance - Main Package
==================================

Tools for blade-element analysis of airscrew (propeller and ducted fan)
performance.

This package provides modules for:
- Airscrew Analysis (airscrew_analyzer): thrust, torque and power versus
  forward speed from blade geometry and airfoil tables
"""

__version__ = "0.1.0"
