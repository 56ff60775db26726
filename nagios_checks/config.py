from datetime import timedelta

# Azure public cloud endpoints
LOGIN_URL = "https://login.microsoftonline.com"
MANAGEMENT_URL = "https://management.azure.com"
GRAPH_URL = "https://graph.microsoft.com/v1.0"

# Token audiences: the v1 endpoint takes a resource, the v2 endpoint a scope
MANAGEMENT_RESOURCE = "https://management.azure.com/"
GRAPH_SCOPE = "https://graph.microsoft.com/.default"

# Logic App run history
RUNS_API_VERSION = "2016-06-01"
RUN_LOOKBACK = timedelta(weeks=1)
RUN_LOOKBACK_TEXT = "1 week ago"

# ping -w deadline, seconds
PING_DEADLINE = 2
