"""Constants for the Live Departure Boards (Darwin LDBWS) JSON API."""

DEPARTURE_BOARD_PATH = "GetDepartureBoard"
ARRIVAL_BOARD_PATH = "GetArrivalBoard"
SERVICE_DETAILS_PATH = "GetServiceDetails"

API_KEY_HEADER = "x-apikey"

# filterType values: departures calling at the filter station, arrivals coming from it
FILTER_TO = "to"
FILTER_FROM = "from"

MAX_ROWS = 150
