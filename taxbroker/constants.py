import datetime


# Prefix for all bot commands, ie: '$taxrate exodus'
COMMAND_PREFIX = "$"

# Universalis is where we get all of our tax data from.
UNIVERSALIS_API_URL = "https://universalis.app/api"
UNIVERSALIS_WORLDS_PATH = "/v2/worlds"
UNIVERSALIS_TAX_RATES_PATH = "/tax-rates"

# No request to universalis should be able to hang the bot.
HTTP_TIMEOUT_SECONDS = 15

# Tax rates change every week on saturday at 07:00 UTC.
RESET_WEEKDAY = 5
RESET_HOUR = 7

# Universalis takes a little while to pick up the new rates after the reset, so we hold
# off on publishing for a few minutes.
PUBLISH_DELAY = datetime.timedelta(minutes=10)

# Rates under this value get flagged as reduced in reports.
REDUCED_RATE_THRESHOLD = 5

# Number of servers to put in each message of the all-servers listing.
SERVER_PAGE_SIZE = 10

# Argument to '$taxrate' that asks for every server at once.
ALL_SERVERS_ARG = "all"

DB_NAME = "taxbroker"
SUBSCRIPTIONS_COLLECTION = "subscriptions"
