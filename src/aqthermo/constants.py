"""Physical constants and unit conversions shared by the property models."""

from __future__ import annotations

import math

R_GAS = 8.31451  # J/(mol·K)
R_CM3_BAR = 83.1451  # cm³·bar/(mol·K)

CAL_TO_J = 4.184
LN_TO_LG = 1.0 / math.log(10.0)
LG_TO_LN = math.log(10.0)

BAR_TO_PA = 1.0e5
# 1 J/bar == 10 cm³/mol == 1e-5 m³/mol
M3_TO_J_PER_BAR = 1.0e5
CM3_TO_J_PER_BAR = 0.1

T_REFERENCE = 298.15  # K
P_REFERENCE = 1.0  # bar

H2O_MOLAR_MASS = 18.015268  # g/mol

# Triple point of water, Helgeson and Kirkham (1974), p. 1098
T_TRIPLE = 273.16  # K
S_TRIPLE = 15.1320 * CAL_TO_J  # J/(mol·K)
G_TRIPLE = -56290.0 * CAL_TO_J  # J/mol
H_TRIPLE = -68767.0 * CAL_TO_J  # J/mol
U_TRIPLE = -67887.0 * CAL_TO_J  # J/mol
A_TRIPLE = -55415.0 * CAL_TO_J  # J/mol
