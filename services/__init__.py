import requests

from config import settings

# Reuse HTTP connections to upstream APIs (connection pooling)
http_session = requests.Session()
http_session.headers.update({'User-Agent': settings.user_agent})
