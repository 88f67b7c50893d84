"""Trimmed copies of the store listing markup the extractors rely on."""

CHROME_PAGE = """<html><head><script>var x = 1;</script></head><body>
<div id="app"></div>
<noscript>
  <div class="e-f-o">
    <span class="e-f-ih" title="Tab Organizer Plus">Tab Organizer Plus</span>
    <span class="e-f-ih" title="{users}">{users}</span>
  </div>
</noscript>
</body></html>"""

ADDON_PAGE = """<html><body>
<dl class="MetadataCard-list">
  <div class="Metadata-element">
    <dd class="MetadataCard-content">{users}</dd>
    <dt class="MetadataCard-title" title="There are {users} users with this add-on installed.">Users</dt>
  </div>
  <div class="Metadata-element">
    <dd class="MetadataCard-content">57</dd>
    <dt class="MetadataCard-title">Reviews</dt>
  </div>
</dl>
</body></html>"""


def chrome_page(users="42 users"):
    return CHROME_PAGE.format(users=users)


def addon_page(users="1234"):
    return ADDON_PAGE.format(users=users)
