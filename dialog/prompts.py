"""
Scripted speech for the skill.
"""

from utils.constants import SUPPORTED_CITIES

SKILL_NAME = "Met Office Decide"
ANSWER_TITLE = "Do you need an umbrella?"

WHICH_CITY = "Which city would you like to check the weather for?"
WHICH_DATE = "For which date?"

WELCOME = "Welcome to %s. %s" % (SKILL_NAME, WHICH_CITY)
WELCOME_REPROMPT = "I can help you make decisions based on world leading " \
                   "weather forecasts. For instance, you can find out if " \
                   "you'll need an umbrella. " + WHICH_CITY

HELP_REPROMPT = "Ask me if you are going to need an umbrella if you like."
HELP = "I'm here to help you make decisions that rely on world leading " \
       "weather forecasts. For instance, you can ask, do I need an umbrella " \
       "in London on Saturday. Or you can say exit. " + HELP_REPROMPT

FALLBACK = "I didn't understand that. " + HELP_REPROMPT

GOODBYE = "Goodbye."

UNKNOWN_CITY = "I'm sorry, I didn't catch that city."

DATE_REPROMPT = "For which date would you like to know if you need an " \
                "umbrella? You can say a day like Monday or this Saturday."
UNKNOWN_DATE = "I'm sorry, I didn't catch that date. " + DATE_REPROMPT

OUT_OF_RANGE = "I can only tell you about the next sixteen days. " + DATE_REPROMPT

UNAVAILABLE = "Sorry, the weather service is experiencing a problem. " \
              "Please try again later."


def supported_cities():
    """Spoken list of the cities offered as examples."""
    return "I can tell you about cities like %s and %s. %s" % \
           (", ".join(SUPPORTED_CITIES[:-1]), SUPPORTED_CITIES[-1], WHICH_CITY)


def unknown_city(city=None):
    """Speech for a city the geocoder couldn't find."""
    if city:
        return "I'm sorry, I don't know where %s is. %s" % (city, WHICH_CITY)
    return "%s %s" % (UNKNOWN_CITY, WHICH_CITY)


def ask_date(location):
    return "For which date would you like to know about %s?" % location.name


def ask_city(when):
    day = "today" if when.display_text == "Today" else when.display_text
    return "For %s, which city would you like to check?" % day


def answer(location, when, decision):
    """The final answer, like "Today in Seattle, take an umbrella."."""
    return "%s in %s, %s." % (when.display_text, location.name,
                              decision[0].lower() + decision[1:])
