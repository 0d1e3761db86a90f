from enum import StrEnum


class DataColumn(StrEnum):
    PV = "pv_kw"
    LOAD = "load_kw"
    PRICE = "price"
    RAW_PRICE = "raw_price"
    AMBIENT_TEMPERATURE = "ambient_temperature_c"
    CLOUDY = "cloudy"
