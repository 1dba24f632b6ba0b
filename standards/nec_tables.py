from core.models import (
    ConductiveMetal, Insulation, NECEdition, RacewayMaterial, RacewayType, Size, TemperatureRating, TradeSize,
)

SIZES = list(Size)


def _by_size(values, first: Size = Size.AWG_14) -> dict:
    """Zip a column of table values with consecutive sizes starting at ``first``."""
    start = SIZES.index(first)
    return dict(zip(SIZES[start:start + len(values)], values))


# NEC Table 310.15(B)(2)(a) - Ambient Temperature Correction Factors
# Based on 86°F (30°C) base ambient
# Format: {(Min_F, Max_F): {Temp_Rating: Factor}}
MIN_TEMP_F = -76
MAX_TEMP_F = 185
TEMP_CORRECTION_FACTORS = {
    (MIN_TEMP_F, 50): {60: 1.29, 75: 1.20, 90: 1.15},
    (51, 59): {60: 1.22, 75: 1.15, 90: 1.12},
    (60, 68): {60: 1.15, 75: 1.11, 90: 1.08},
    (69, 77): {60: 1.08, 75: 1.05, 90: 1.04},
    (78, 86): {60: 1.00, 75: 1.00, 90: 1.00},
    (87, 95): {60: 0.91, 75: 0.94, 90: 0.96},
    (96, 104): {60: 0.82, 75: 0.88, 90: 0.91},
    (105, 113): {60: 0.71, 75: 0.82, 90: 0.87},
    (114, 122): {60: 0.58, 75: 0.75, 90: 0.82},
    (123, 131): {60: 0.41, 75: 0.67, 90: 0.76},
    (132, 140): {60: 0.00, 75: 0.58, 90: 0.71},
    (141, 149): {60: 0.00, 75: 0.47, 90: 0.65},
    (150, 158): {60: 0.00, 75: 0.33, 90: 0.58},
    (159, 167): {60: 0.00, 75: 0.00, 90: 0.50},
    (168, 176): {60: 0.00, 75: 0.00, 90: 0.41},
    (177, MAX_TEMP_F): {60: 0.00, 75: 0.00, 90: 0.29},
}

# NEC Table 310.15(B)(3)(a) - Adjustment Factors for More Than Three Current-Carrying Conductors
# Format: {Max_Conductors: Factor}
GROUPING_FACTORS = {
    3: 1.0,
    6: 0.80,   # 4-6 conductors
    9: 0.70,   # 7-9
    20: 0.50,  # 10-20
    30: 0.45,  # 21-30
    40: 0.40,  # 31-40
}
GROUPING_FACTOR_41_PLUS = 0.35
RELAXED_RULE_5_FACTOR = 0.60

# NEC Table 310.15(B)(3)(c) - Rooftop temperature adders (°F)
# 2014: {Max_Distance_In: Adder}, distance measured from the roof to the bottom of the raceway
ROOFTOP_ADDERS_2014 = {
    0.5: 60,
    3.5: 40,
    12.0: 30,
    36.0: 25,
}
# 2017 and later: a single adder for raceways within 7/8 in of the roof
ROOFTOP_ADDER_2017 = 60
ROOFTOP_THRESHOLD_IN = {
    NECEdition.NEC2014: 36.0,
    NECEdition.NEC2017: 7 / 8,
    NECEdition.NEC2020: 7 / 8,
}

# NEC Table 310.16 - Allowable Ampacities of Insulated Conductors (not more than 3 CCC, 86°F)
# Format: {Size: {Temp_Rating: Amps}}
NEC_310_16_COPPER = {
    Size.AWG_14: {60: 15, 75: 20, 90: 25},
    Size.AWG_12: {60: 20, 75: 25, 90: 30},
    Size.AWG_10: {60: 30, 75: 35, 90: 40},
    Size.AWG_8: {60: 40, 75: 50, 90: 55},
    Size.AWG_6: {60: 55, 75: 65, 90: 75},
    Size.AWG_4: {60: 70, 75: 85, 90: 95},
    Size.AWG_3: {60: 85, 75: 100, 90: 115},
    Size.AWG_2: {60: 95, 75: 115, 90: 130},
    Size.AWG_1: {60: 110, 75: 130, 90: 145},
    Size.AWG_1_0: {60: 125, 75: 150, 90: 170},
    Size.AWG_2_0: {60: 145, 75: 175, 90: 195},
    Size.AWG_3_0: {60: 165, 75: 200, 90: 225},
    Size.AWG_4_0: {60: 195, 75: 230, 90: 260},
    Size.KCMIL_250: {60: 215, 75: 255, 90: 290},
    Size.KCMIL_300: {60: 240, 75: 285, 90: 320},
    Size.KCMIL_350: {60: 260, 75: 310, 90: 350},
    Size.KCMIL_400: {60: 280, 75: 335, 90: 380},
    Size.KCMIL_500: {60: 320, 75: 380, 90: 430},
    Size.KCMIL_600: {60: 350, 75: 420, 90: 475},
    Size.KCMIL_700: {60: 385, 75: 460, 90: 520},
    Size.KCMIL_750: {60: 400, 75: 475, 90: 535},
    Size.KCMIL_800: {60: 410, 75: 490, 90: 555},
    Size.KCMIL_900: {60: 435, 75: 520, 90: 585},
    Size.KCMIL_1000: {60: 455, 75: 545, 90: 615},
    Size.KCMIL_1250: {60: 495, 75: 590, 90: 665},
    Size.KCMIL_1500: {60: 525, 75: 625, 90: 705},
    Size.KCMIL_1750: {60: 545, 75: 650, 90: 735},
    Size.KCMIL_2000: {60: 555, 75: 665, 90: 750},
}

# 14 AWG aluminum is not listed
NEC_310_16_ALUMINUM = {
    Size.AWG_14: {60: 0, 75: 0, 90: 0},
    Size.AWG_12: {60: 15, 75: 20, 90: 25},
    Size.AWG_10: {60: 25, 75: 30, 90: 35},
    Size.AWG_8: {60: 35, 75: 40, 90: 45},
    Size.AWG_6: {60: 40, 75: 50, 90: 55},
    Size.AWG_4: {60: 55, 75: 65, 90: 75},
    Size.AWG_3: {60: 65, 75: 75, 90: 85},
    Size.AWG_2: {60: 75, 75: 90, 90: 100},
    Size.AWG_1: {60: 85, 75: 100, 90: 115},
    Size.AWG_1_0: {60: 100, 75: 120, 90: 135},
    Size.AWG_2_0: {60: 115, 75: 135, 90: 150},
    Size.AWG_3_0: {60: 130, 75: 155, 90: 175},
    Size.AWG_4_0: {60: 150, 75: 180, 90: 205},
    Size.KCMIL_250: {60: 170, 75: 205, 90: 230},
    Size.KCMIL_300: {60: 195, 75: 230, 90: 260},
    Size.KCMIL_350: {60: 210, 75: 250, 90: 280},
    Size.KCMIL_400: {60: 225, 75: 270, 90: 305},
    Size.KCMIL_500: {60: 260, 75: 310, 90: 350},
    Size.KCMIL_600: {60: 285, 75: 340, 90: 385},
    Size.KCMIL_700: {60: 315, 75: 375, 90: 425},
    Size.KCMIL_750: {60: 320, 75: 385, 90: 435},
    Size.KCMIL_800: {60: 330, 75: 395, 90: 445},
    Size.KCMIL_900: {60: 355, 75: 425, 90: 480},
    Size.KCMIL_1000: {60: 375, 75: 445, 90: 500},
    Size.KCMIL_1250: {60: 405, 75: 485, 90: 545},
    Size.KCMIL_1500: {60: 435, 75: 520, 90: 585},
    Size.KCMIL_1750: {60: 455, 75: 545, 90: 615},
    Size.KCMIL_2000: {60: 470, 75: 560, 90: 630},
}

NEC_310_16 = {
    ConductiveMetal.COPPER: NEC_310_16_COPPER,
    ConductiveMetal.ALUMINUM: NEC_310_16_ALUMINUM,
}

# NEC Chapter 9, Table 9 - AC Resistance (Ohms to Neutral per 1000 ft, 75°C)
# Format: {Size: {Metal: (PVC, Aluminum, Steel)}}
TABLE_9_AC_RESISTANCE = {
    Size.AWG_14: {ConductiveMetal.COPPER: (3.1, 3.1, 3.1), ConductiveMetal.ALUMINUM: (4.1306, 4.1306, 4.1306)},
    Size.AWG_12: {ConductiveMetal.COPPER: (2.0, 2.0, 2.0), ConductiveMetal.ALUMINUM: (3.2, 3.2, 3.2)},
    Size.AWG_10: {ConductiveMetal.COPPER: (1.2, 1.2, 1.2), ConductiveMetal.ALUMINUM: (2.0, 2.0, 2.0)},
    Size.AWG_8: {ConductiveMetal.COPPER: (0.78, 0.78, 0.78), ConductiveMetal.ALUMINUM: (1.3, 1.3, 1.3)},
    Size.AWG_6: {ConductiveMetal.COPPER: (0.49, 0.49, 0.49), ConductiveMetal.ALUMINUM: (0.81, 0.81, 0.81)},
    Size.AWG_4: {ConductiveMetal.COPPER: (0.31, 0.31, 0.31), ConductiveMetal.ALUMINUM: (0.51, 0.51, 0.51)},
    Size.AWG_3: {ConductiveMetal.COPPER: (0.25, 0.25, 0.25), ConductiveMetal.ALUMINUM: (0.40, 0.41, 0.40)},
    Size.AWG_2: {ConductiveMetal.COPPER: (0.19, 0.20, 0.20), ConductiveMetal.ALUMINUM: (0.32, 0.32, 0.32)},
    Size.AWG_1: {ConductiveMetal.COPPER: (0.15, 0.16, 0.16), ConductiveMetal.ALUMINUM: (0.25, 0.26, 0.25)},
    Size.AWG_1_0: {ConductiveMetal.COPPER: (0.12, 0.13, 0.12), ConductiveMetal.ALUMINUM: (0.20, 0.21, 0.20)},
    Size.AWG_2_0: {ConductiveMetal.COPPER: (0.10, 0.10, 0.10), ConductiveMetal.ALUMINUM: (0.16, 0.16, 0.16)},
    Size.AWG_3_0: {ConductiveMetal.COPPER: (0.077, 0.082, 0.079), ConductiveMetal.ALUMINUM: (0.13, 0.13, 0.13)},
    Size.AWG_4_0: {ConductiveMetal.COPPER: (0.062, 0.067, 0.063), ConductiveMetal.ALUMINUM: (0.10, 0.11, 0.10)},
    Size.KCMIL_250: {ConductiveMetal.COPPER: (0.052, 0.057, 0.054), ConductiveMetal.ALUMINUM: (0.085, 0.090, 0.086)},
    Size.KCMIL_300: {ConductiveMetal.COPPER: (0.044, 0.049, 0.045), ConductiveMetal.ALUMINUM: (0.071, 0.076, 0.072)},
    Size.KCMIL_350: {ConductiveMetal.COPPER: (0.038, 0.043, 0.039), ConductiveMetal.ALUMINUM: (0.061, 0.066, 0.063)},
    Size.KCMIL_400: {ConductiveMetal.COPPER: (0.033, 0.038, 0.035), ConductiveMetal.ALUMINUM: (0.054, 0.059, 0.055)},
    Size.KCMIL_500: {ConductiveMetal.COPPER: (0.027, 0.032, 0.029), ConductiveMetal.ALUMINUM: (0.043, 0.048, 0.045)},
    Size.KCMIL_600: {ConductiveMetal.COPPER: (0.023, 0.028, 0.025), ConductiveMetal.ALUMINUM: (0.036, 0.041, 0.038)},
    Size.KCMIL_700: {ConductiveMetal.COPPER: (0.021, 0.026, 0.0219), ConductiveMetal.ALUMINUM: (0.0325, 0.038, 0.0337)},
    Size.KCMIL_750: {ConductiveMetal.COPPER: (0.019, 0.024, 0.021), ConductiveMetal.ALUMINUM: (0.029, 0.034, 0.031)},
    Size.KCMIL_800: {ConductiveMetal.COPPER: (0.0182, 0.023, 0.0204), ConductiveMetal.ALUMINUM: (0.0278, 0.0326, 0.0298)},
    Size.KCMIL_900: {ConductiveMetal.COPPER: (0.0166, 0.021, 0.0192), ConductiveMetal.ALUMINUM: (0.0254, 0.0298, 0.0274)},
    Size.KCMIL_1000: {ConductiveMetal.COPPER: (0.015, 0.019, 0.018), ConductiveMetal.ALUMINUM: (0.023, 0.027, 0.025)},
    Size.KCMIL_1250: {ConductiveMetal.COPPER: (0.011351, 0.014523, 0.014523),
                      ConductiveMetal.ALUMINUM: (0.0177, 0.023436, 0.0216)},
    Size.KCMIL_1500: {ConductiveMetal.COPPER: (0.009798, 0.013127, 0.013127),
                      ConductiveMetal.ALUMINUM: (0.015, 0.020941, 0.0193)},
    Size.KCMIL_1750: {ConductiveMetal.COPPER: (0.00871, 0.012275, 0.012275),
                      ConductiveMetal.ALUMINUM: (0.0131, 0.019205, 0.0177)},
    Size.KCMIL_2000: {ConductiveMetal.COPPER: (0.007928, 0.011703, 0.011703),
                      ConductiveMetal.ALUMINUM: (0.0117, 0.018011, 0.0166)},
}
AC_RESISTANCE_COLUMN = {
    RacewayMaterial.PVC: 0,
    RacewayMaterial.ALUMINUM: 1,
    RacewayMaterial.STEEL: 2,
}

# NEC Chapter 9, Table 9 - Reactance XL (Ohms to Neutral per 1000 ft)
# Format: {Size: (Non-magnetic raceway, Magnetic raceway)}
TABLE_9_REACTANCE = {
    Size.AWG_14: (0.058, 0.073),
    Size.AWG_12: (0.054, 0.068),
    Size.AWG_10: (0.054, 0.068),
    Size.AWG_8: (0.050, 0.063),
    Size.AWG_6: (0.051, 0.064),
    Size.AWG_4: (0.048, 0.060),
    Size.AWG_3: (0.047, 0.059),
    Size.AWG_2: (0.045, 0.057),
    Size.AWG_1: (0.046, 0.057),
    Size.AWG_1_0: (0.044, 0.055),
    Size.AWG_2_0: (0.043, 0.054),
    Size.AWG_3_0: (0.042, 0.052),
    Size.AWG_4_0: (0.041, 0.051),
    Size.KCMIL_250: (0.041, 0.052),
    Size.KCMIL_300: (0.041, 0.051),
    Size.KCMIL_350: (0.040, 0.050),
    Size.KCMIL_400: (0.040, 0.049),
    Size.KCMIL_500: (0.039, 0.048),
    Size.KCMIL_600: (0.039, 0.048),
    Size.KCMIL_700: (0.0385, 0.048),
    Size.KCMIL_750: (0.038, 0.048),
    Size.KCMIL_800: (0.0378, 0.0476),
    Size.KCMIL_900: (0.0374, 0.0468),
    Size.KCMIL_1000: (0.037, 0.046),
    Size.KCMIL_1250: (0.036, 0.046),
    Size.KCMIL_1500: (0.035, 0.045),
    Size.KCMIL_1750: (0.034, 0.045),
    Size.KCMIL_2000: (0.034, 0.044),
}

# NEC Chapter 9, Table 8 - Conductor Properties
# Format: {Size: (Area_CM, Cu_Uncoated_DC, Cu_Coated_DC, Al_DC)}, DC resistance in Ohms per 1000 ft at 75°C
TABLE_8_PROPERTIES = {
    Size.AWG_14: (4110, 3.07, 3.19, 5.06),
    Size.AWG_12: (6530, 1.93, 2.01, 3.18),
    Size.AWG_10: (10380, 1.21, 1.26, 2.0),
    Size.AWG_8: (16510, 0.764, 0.786, 1.26),
    Size.AWG_6: (26240, 0.491, 0.510, 0.808),
    Size.AWG_4: (41740, 0.308, 0.321, 0.508),
    Size.AWG_3: (52620, 0.245, 0.254, 0.403),
    Size.AWG_2: (66360, 0.194, 0.201, 0.319),
    Size.AWG_1: (83690, 0.154, 0.160, 0.253),
    Size.AWG_1_0: (105600, 0.122, 0.127, 0.201),
    Size.AWG_2_0: (133100, 0.0967, 0.101, 0.159),
    Size.AWG_3_0: (167800, 0.0766, 0.0797, 0.126),
    Size.AWG_4_0: (211600, 0.0608, 0.0626, 0.100),
    Size.KCMIL_250: (250000, 0.0515, 0.0535, 0.0847),
    Size.KCMIL_300: (300000, 0.0429, 0.0446, 0.0707),
    Size.KCMIL_350: (350000, 0.0367, 0.0382, 0.0605),
    Size.KCMIL_400: (400000, 0.0321, 0.0331, 0.0529),
    Size.KCMIL_500: (500000, 0.0258, 0.0265, 0.0424),
    Size.KCMIL_600: (600000, 0.0214, 0.0223, 0.0353),
    Size.KCMIL_700: (700000, 0.0184, 0.0189, 0.0303),
    Size.KCMIL_750: (750000, 0.0171, 0.0176, 0.0282),
    Size.KCMIL_800: (800000, 0.0161, 0.0166, 0.0265),
    Size.KCMIL_900: (900000, 0.0143, 0.0147, 0.0235),
    Size.KCMIL_1000: (1000000, 0.0129, 0.0132, 0.0212),
    Size.KCMIL_1250: (1250000, 0.0103, 0.0106, 0.0169),
    Size.KCMIL_1500: (1500000, 0.00858, 0.00883, 0.0141),
    Size.KCMIL_1750: (1750000, 0.00735, 0.00756, 0.0121),
    Size.KCMIL_2000: (2000000, 0.00643, 0.00662, 0.0106),
}

# NEC Chapter 9, Table 5 - Dimensions of Insulated Conductors (approximate area, in²)
_AREA_TW = _by_size([
    0.0139, 0.0181, 0.0243, 0.0437, 0.0726, 0.0973, 0.1134, 0.1333, 0.1901, 0.2223, 0.2624, 0.3117, 0.3718,
    0.4596, 0.5281, 0.5958, 0.6619, 0.7901, 0.9729, 1.101, 1.1652, 1.2272, 1.3561, 1.4784, 1.8602, 2.1695,
    2.4773, 2.7818,
])
_AREA_RHW = _by_size([
    0.0293, 0.0353, 0.0437, 0.0835, 0.1041, 0.1333, 0.1521, 0.1750, 0.2660, 0.3039, 0.3505, 0.4072, 0.4754,
    0.6291, 0.7088, 0.7870, 0.8626, 1.0082, 1.2135, 1.3561, 1.4272, 1.4957, 1.6377, 1.7719, 2.3479, 2.6938,
    3.0357, 3.3719,
])
_AREA_THWN = _by_size([
    0.0097, 0.0133, 0.0211, 0.0366, 0.0507, 0.0824, 0.0973, 0.1158, 0.1562, 0.1855, 0.2223, 0.2679, 0.3237,
    0.3970, 0.4608, 0.5242, 0.5863, 0.7073, 0.8676, 0.9887, 1.0496, 1.1085, 1.2311, 1.3478,
])
_AREA_ZW = _by_size([0.0139, 0.0181, 0.0243, 0.0437, 0.059, 0.0814, 0.0962, 0.1146])
_AREA_FEP = _by_size([0.0100, 0.0137, 0.0191, 0.0333, 0.0468, 0.0670, 0.0804, 0.0973])
_AREA_XHH = _by_size([
    0.0139, 0.0181, 0.0243, 0.0437, 0.0590, 0.0814, 0.0962, 0.1146, 0.1534, 0.1825, 0.2190, 0.2642, 0.3197,
    0.3904, 0.4536, 0.5166, 0.5782, 0.6984, 0.8709, 0.9923, 1.0532, 1.1122, 1.2351, 1.3519, 1.7180, 2.0156,
    2.3127, 2.6073,
])

# Insulations without a Table 5 entry (USE, TBS, SA, SIS, MI, USE-2, ZW-2) have no area
TABLE_5_AREAS = {
    Insulation.TW: _AREA_TW,
    Insulation.THW: _AREA_TW,
    Insulation.THHW: _AREA_TW,
    Insulation.THW_2: _AREA_TW,
    Insulation.RHW: _AREA_RHW,
    Insulation.RHH: _AREA_RHW,
    Insulation.RHW_2: _AREA_RHW,
    Insulation.THWN: _AREA_THWN,
    Insulation.THHN: _AREA_THWN,
    Insulation.THWN_2: _AREA_THWN,
    Insulation.ZW: _AREA_ZW,
    Insulation.FEP: _AREA_FEP,
    Insulation.FEPB: _AREA_FEP,
    Insulation.XHH: _AREA_XHH,
    Insulation.XHHW: _AREA_XHH,
    Insulation.XHHW_2: _AREA_XHH,
}

# NEC Chapter 9, Table 5A - Compact Copper and Aluminum Building Wire (approximate area, in²)
_COMPACT_SIZES = [
    Size.AWG_8, Size.AWG_6, Size.AWG_4, Size.AWG_2, Size.AWG_1, Size.AWG_1_0, Size.AWG_2_0, Size.AWG_3_0,
    Size.AWG_4_0, Size.KCMIL_250, Size.KCMIL_300, Size.KCMIL_350, Size.KCMIL_400, Size.KCMIL_500, Size.KCMIL_600,
    Size.KCMIL_700, Size.KCMIL_750, Size.KCMIL_900, Size.KCMIL_1000,
]
_COMPACT_RHH = dict(zip(_COMPACT_SIZES, [
    0.0531, 0.0683, 0.0881, 0.1194, 0.1698, 0.1963, 0.2290, 0.2733, 0.3217, 0.4015, 0.4596, 0.5153, 0.5741,
    0.6793, 0.8413, 0.9503, 1.0118, 1.2076, 1.2968,
]))
_COMPACT_THW = dict(zip(_COMPACT_SIZES, [
    0.0510, 0.0660, 0.0881, 0.1194, 0.1698, 0.1963, 0.2332, 0.2733, 0.3267, 0.4128, 0.4717, 0.5281, 0.5876,
    0.6939, 0.8659, 0.9676, 1.0386, 1.1766, 1.2968,
]))
# THHN compact starts at 6 AWG
_COMPACT_THHN = dict(zip(_COMPACT_SIZES[1:], [
    0.0452, 0.0730, 0.1017, 0.1352, 0.1590, 0.1924, 0.2290, 0.2780, 0.3525, 0.4071, 0.4656, 0.5216,
    0.6151, 0.7620, 0.8659, 0.9076, 1.1196, 1.2370,
]))
_COMPACT_XHHW = dict(zip(_COMPACT_SIZES, [
    0.0394, 0.0530, 0.0730, 0.1017, 0.1352, 0.1590, 0.1885, 0.2290, 0.2733, 0.3421, 0.4015, 0.4536, 0.5026,
    0.6082, 0.7542, 0.8659, 0.9331, 1.0733, 1.1882,
]))
TABLE_5A_AREAS = {
    Insulation.RHH: _COMPACT_RHH,
    Insulation.RHW: _COMPACT_RHH,
    Insulation.USE: _COMPACT_RHH,
    Insulation.THW: _COMPACT_THW,
    Insulation.THHW: _COMPACT_THW,
    Insulation.THHN: _COMPACT_THHN,
    Insulation.XHHW: _COMPACT_XHHW,
}
TABLE_5A_BARE_AREAS = dict(zip(_COMPACT_SIZES, [
    0.0141, 0.0224, 0.0356, 0.0564, 0.0702, 0.0887, 0.1110, 0.1405, 0.1772, 0.2124, 0.2552, 0.2980, 0.3411,
    0.4254, 0.5191, 0.6041, 0.6475, 0.7838, 0.8825,
]))

# NEC Table 310.104(A) - Conductor Applications and Insulations, maximum operating temperature
INSULATION_RATINGS = {
    Insulation.TW: TemperatureRating.T60,
    Insulation.RHW: TemperatureRating.T75,
    Insulation.THW: TemperatureRating.T75,
    Insulation.THWN: TemperatureRating.T75,
    Insulation.USE: TemperatureRating.T75,
    Insulation.ZW: TemperatureRating.T75,
    Insulation.TBS: TemperatureRating.T90,
    Insulation.SA: TemperatureRating.T90,
    Insulation.SIS: TemperatureRating.T90,
    Insulation.FEP: TemperatureRating.T90,
    Insulation.FEPB: TemperatureRating.T90,
    Insulation.MI: TemperatureRating.T90,
    Insulation.RHH: TemperatureRating.T90,
    Insulation.RHW_2: TemperatureRating.T90,
    Insulation.THHN: TemperatureRating.T90,
    Insulation.THHW: TemperatureRating.T90,
    Insulation.THW_2: TemperatureRating.T90,
    Insulation.THWN_2: TemperatureRating.T90,
    Insulation.USE_2: TemperatureRating.T90,
    Insulation.XHH: TemperatureRating.T90,
    Insulation.XHHW: TemperatureRating.T90,
    Insulation.XHHW_2: TemperatureRating.T90,
    Insulation.ZW_2: TemperatureRating.T90,
}
# Rated 75°C only in wet locations
WET_LOCATION_DOWNGRADES = {Insulation.THHW, Insulation.XHHW}
# Representative insulation of each termination rating column
RATING_INSULATIONS = {
    TemperatureRating.T60: Insulation.TW,
    TemperatureRating.T75: Insulation.THW,
    TemperatureRating.T90: Insulation.THHW,
}
# NEC 310.15(B)(3)(c) Exception
ROOFTOP_EXEMPT_INSULATIONS = {Insulation.XHHW_2}

# NEC Chapter 9, Table 4 - Dimensions and Percent Area of Conduit and Tubing (total area 100%, in²)
TRADES = list(TradeSize)


def _by_trade(values, first: TradeSize = TradeSize.T1_2) -> dict:
    start = TRADES.index(first)
    return dict(zip(TRADES[start:start + len(values)], values))


_AREA_EMT = _by_trade([0.304, 0.533, 0.864, 1.496, 2.036, 3.356, 5.858, 8.846, 11.545, 14.753])
_AREA_ENT = _by_trade([0.285, 0.508, 0.832, 1.453, 1.986, 3.291])
_AREA_FMC = _by_trade(
    [0.116, 0.317, 0.533, 0.817, 1.277, 1.858, 3.269, 4.909, 7.069, 9.621, 12.566], TradeSize.T3_8
)
_AREA_IMC = _by_trade([0.342, 0.586, 0.959, 1.647, 2.225, 3.63, 5.135, 7.922, 10.584, 13.631])
_AREA_LFNC_A = _by_trade([0.192, 0.312, 0.535, 0.854, 1.502, 2.018, 3.343], TradeSize.T3_8)
_AREA_LFNC_B = _by_trade([0.192, 0.314, 0.541, 0.873, 1.528, 1.981, 3.246], TradeSize.T3_8)
_AREA_LFMC = {
    **_AREA_LFNC_B,
    **_by_trade([4.881, 7.475, 9.731, 12.692], TradeSize.T2_1_2),
}
_AREA_RMC = _by_trade(
    [0.314, 0.549, 0.887, 1.526, 2.071, 3.408, 4.866, 7.499, 10.01, 12.882, 20.212, 29.158]
)
_AREA_PVC_80 = _by_trade(
    [0.217, 0.409, 0.688, 1.237, 1.711, 2.874, 4.119, 6.442, 8.688, 11.258, 17.855, 25.598]
)
_AREA_PVC_40 = _by_trade(
    [0.285, 0.508, 0.832, 1.453, 1.986, 3.291, 4.695, 7.268, 9.737, 12.554, 19.761, 28.567]
)
_AREA_PVC_A = _by_trade([0.385, 0.65, 1.084, 1.767, 2.324, 3.647, 5.453, 8.194, 10.694, 13.723])
_AREA_PVC_EB = {
    TradeSize.T2: 3.874,
    TradeSize.T3: 8.709,
    TradeSize.T3_1_2: 11.365,
    TradeSize.T4: 14.448,
    TradeSize.T5: 22.195,
    TradeSize.T6: 31.53,
}

TABLE_4_AREAS = {
    RacewayType.EMT: _AREA_EMT,
    RacewayType.EMT_AL: _AREA_EMT,
    RacewayType.ENT: _AREA_ENT,
    RacewayType.FMC: _AREA_FMC,
    RacewayType.FMC_AL: _AREA_FMC,
    RacewayType.IMC: _AREA_IMC,
    RacewayType.LFNC_A: _AREA_LFNC_A,
    RacewayType.LFNC_B: _AREA_LFNC_B,
    RacewayType.LFMC: _AREA_LFMC,
    RacewayType.LFMC_AL: _AREA_LFMC,
    RacewayType.RMC: _AREA_RMC,
    RacewayType.RMC_AL: _AREA_RMC,
    RacewayType.PVC_80: _AREA_PVC_80,
    RacewayType.PVC_40: _AREA_PVC_40,
    RacewayType.HDPE: _AREA_PVC_40,
    RacewayType.PVC_A: _AREA_PVC_A,
    RacewayType.PVC_EB: _AREA_PVC_EB,
}

# NEC Chapter 9, Table 1 - Percent of Cross Section of Conduit and Tubing for Conductors and Cables
FILL_ONE_CONDUCTOR = 53
FILL_TWO_CONDUCTORS = 31
FILL_OVER_TWO_CONDUCTORS = 40
FILL_NIPPLE = 60
NIPPLE_MAX_LENGTH_IN = 24
BUNDLE_MAX_LENGTH_IN = 24

# NEC Table 250.122 - Minimum Size Equipment Grounding Conductors for Grounding Raceway and Equipment
# Format: (OCPD_Rating_A, Copper, Aluminum)
TABLE_250_122 = [
    (15, Size.AWG_14, Size.AWG_12),
    (20, Size.AWG_12, Size.AWG_10),
    (60, Size.AWG_10, Size.AWG_8),
    (100, Size.AWG_8, Size.AWG_6),
    (200, Size.AWG_6, Size.AWG_4),
    (300, Size.AWG_4, Size.AWG_2),
    (400, Size.AWG_3, Size.AWG_1),
    (500, Size.AWG_2, Size.AWG_1_0),
    (600, Size.AWG_1, Size.AWG_2_0),
    (800, Size.AWG_1_0, Size.AWG_3_0),
    (1000, Size.AWG_2_0, Size.AWG_4_0),
    (1200, Size.AWG_3_0, Size.KCMIL_250),
    (1600, Size.AWG_4_0, Size.KCMIL_350),
    (2000, Size.KCMIL_250, Size.KCMIL_400),
    (2500, Size.KCMIL_350, Size.KCMIL_600),
    (3000, Size.KCMIL_400, Size.KCMIL_600),
    (4000, Size.KCMIL_500, Size.KCMIL_750),
    (5000, Size.KCMIL_700, Size.KCMIL_1250),
    (6000, Size.KCMIL_800, Size.KCMIL_1250),
]


def get_temp_correction(temp_f: float, temp_rating: int) -> float:
    # Table rows are whole-degree bins; a fractional reading belongs to the bin it truncates into
    for (min_t, max_t), ratings in TEMP_CORRECTION_FACTORS.items():
        if min_t <= temp_f < max_t + 1:
            return ratings.get(temp_rating, 0.0)
    return 0.0  # Outside the table, unusable


def get_grouping_factor(count: int) -> float:
    for limit in sorted(GROUPING_FACTORS.keys()):
        if count <= limit:
            return GROUPING_FACTORS[limit]
    return GROUPING_FACTOR_41_PLUS
