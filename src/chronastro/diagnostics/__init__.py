"""Diagnostics package.

- dut1_check: pure Python, compares the ΔT models with the leap-second list
- deltat_compare: optional (requires the diagnostics extras: numpy, matplotlib)
"""

__all__ = ["deltat_compare", "dut1_check"]
