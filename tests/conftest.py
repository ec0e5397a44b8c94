import pytest

from patchnotes.config import ConfigManager
from patchnotes.tags import TagRules

HOTFIX_URL = "https://worldofwarcraft.blizzard.com/en-us/news/23892230/hotfixes-january-24-2023"
CONTENT_UPDATE_URL = "https://worldofwarcraft.blizzard.com/en-us/news/23892227/patch-10-0-5-notes"

HOTFIX_HTML = """
<html>
<body>
<div class="Blog">
<div class="detail">
<p>Here is a list of hotfixes that address various issues.</p>
<h4>January 25, 2023</h4>
<p><strong>Classes</strong></p>
<ul>
  <li><strong>Death Knight</strong>
    <ul>
      <li>Frost Strike damage increased by 10%.</li>
    </ul>
  </li>
  <li>Fixed an issue where some spells could not be cast.</li>
</ul>
<p><strong>Player versus Player</strong></p>
<ul>
  <li>Solo Shuffle rating gains have been adjusted.</li>
</ul>
<p><strong>Wrath of the Lich King Classic</strong></p>
<ul>
  <li>Fixed a crash in Naxxramas.</li>
</ul>
<h4>January 24, 2023</h4>
<p><strong>Realms [with weekly restarts]</strong></p>
<ul>
  <li>Realms will be restarted.</li>
</ul>
</div>
</div>
</body>
</html>
"""

CONTENT_UPDATE_HTML = """
<html>
<body>
<div class="Blog">
<div class="detail">
<h3>Patch 10.0.5 Notes</h3>
<p>Read on for the complete list of changes in this update.</p>
<h3 id="item3">Mythic+</h3>
<ul>
  <li>Players entering a dungeon now receive a buff.</li>
</ul>
<h3 id="item4">The Azure Vaults (Heroic)</h3>
<ul>
  <li><strong>Leymor</strong>
    <ul><li>Leymor's health has been reduced by 10%.</li></ul>
  </li>
</ul>
</div>
</div>
</body>
</html>
"""


@pytest.fixture
def config(tmp_path):
    """Configuration with built-in defaults only."""
    return ConfigManager(str(tmp_path / "missing.yaml"))


@pytest.fixture
def rules():
    return TagRules()


@pytest.fixture
def hotfix_html():
    return HOTFIX_HTML


@pytest.fixture
def content_update_html():
    return CONTENT_UPDATE_HTML
