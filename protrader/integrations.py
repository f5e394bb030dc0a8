"""HTML snippets for the embedded waitlist widget and analytics tag.

Both render nothing unless their key is configured.
"""

import html
import logging

from protrader.config import CLERK_JS_URL, CLERK_PUBLISHABLE_KEY, GA_MEASUREMENT_ID

logger = logging.getLogger(__name__)

WAITLIST_HEIGHT = 420


def waitlist_html(publishable_key: str = CLERK_PUBLISHABLE_KEY,
                  script_url: str = CLERK_JS_URL) -> str:
    """Markup that loads Clerk JS and mounts its waitlist component.

    Returns an empty string when no publishable key is set.
    """
    if not publishable_key:
        logger.debug("No Clerk publishable key configured, waitlist disabled")
        return ""

    key = html.escape(publishable_key, quote=True)
    src = html.escape(script_url, quote=True)
    return f"""
<div id="waitlist"></div>
<script async crossorigin="anonymous" data-clerk-publishable-key="{key}"
        src="{src}" type="text/javascript"></script>
<script>
  window.addEventListener("load", async function () {{
    await window.Clerk.load();
    window.Clerk.mountWaitlist(document.getElementById("waitlist"));
  }});
</script>
"""


def analytics_html(measurement_id: str = GA_MEASUREMENT_ID) -> str:
    """Google tag snippet, or an empty string when no id is set."""
    if not measurement_id:
        return ""

    tag = html.escape(measurement_id, quote=True)
    return f"""
<script async src="https://www.googletagmanager.com/gtag/js?id={tag}"></script>
<script>
  window.dataLayer = window.dataLayer || [];
  function gtag(){{dataLayer.push(arguments);}}
  gtag("js", new Date());
  gtag("config", "{tag}");
</script>
"""
