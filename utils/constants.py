"""
Constants for the Met Office Decide Alexa skill.

This module contains the slot names of the interaction model, the cities
offered to the user when a location is not understood, and the calendar
words used when speaking dates.
"""

# Slot names used in Alexa interaction model
SLOTS = [
    "City",
    "Date",
    "location",
    "ukPlace",
]

# Slots that may carry the city in a one-shot request, in priority order
ONESHOT_CITY_SLOTS = ["location", "City", "ukPlace"]

# Cities offered when the user's city was not understood
SUPPORTED_CITIES = [
    "London",
    "Manchester",
    "Birmingham",
    "Leeds",
    "Glasgow",
    "Edinburgh",
    "Cardiff",
    "Belfast",
    "Bristol",
    "Exeter",
]

# Day names
DAYS = ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]

# Ordinal words for the days of the month
MONTH_DAYS = [
    "first",
    "second",
    "third",
    "fourth",
    "fifth",
    "sixth",
    "seventh",
    "eighth",
    "ninth",
    "tenth",
    "eleventh",
    "twelfth",
    "thirteenth",
    "fourteenth",
    "fifteenth",
    "sixteenth",
    "seventeenth",
    "eighteenth",
    "nineteenth",
    "twentieth",
    "twenty first",
    "twenty second",
    "twenty third",
    "twenty fourth",
    "twenty fifth",
    "twenty sixth",
    "twenty seventh",
    "twenty eighth",
    "twenty ninth",
    "thirtieth",
    "thirty first",
]

# Month names
MONTH_NAMES = [
    "january",
    "february",
    "march",
    "april",
    "may",
    "june",
    "july",
    "august",
    "september",
    "october",
    "november",
    "december",
]

# Hours of forecast covered by a date request
DATE_RANGE_HOURS = 24

# Rain probability (0.0 - 1.0) above which an umbrella is recommended
RAIN_THRESHOLD = 0.5

# Days ahead covered by the daily forecast, including today
FORECAST_DAYS = 16
