# NASA POWER daily point API
POWER_BASE_URL = "https://power.larc.nasa.gov/api/temporal/daily/point"
POWER_COMMUNITY = "RE"
POWER_FORMAT = "JSON"
POWER_FILL_VALUE = -999.0

# Parameter codes, in the order they map onto RawSeries fields
PARAM_MAX_TEMP = "T2M_MAX"
PARAM_MIN_TEMP = "T2M_MIN"
PARAM_PRECIPITATION = "PRECTOTCORR"
PARAM_WIND_SPEED = "WS10M"
POWER_PARAMETERS = [PARAM_MAX_TEMP, PARAM_MIN_TEMP, PARAM_PRECIPITATION, PARAM_WIND_SPEED]

# Historical window (inclusive years)
HISTORY_START_YEAR = 1981
HISTORY_END_YEAR = 2020

REQUEST_TIMEOUT_S = 60

# Cache keys round coordinates to this many decimal places (~11 m)
CACHE_PRECISION = 4

# WS10M is reported in m/s
MS_TO_KMH = 3.6
