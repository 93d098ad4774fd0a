from __future__ import annotations

from pathlib import Path

import pytest

SOURCE_HTML = """<html><body>
<div class="profile-page profile-custom-css theme-neon" style="background-image: url(https://cdn.example.com/bg.png)">
  <div class="profile-display-name">Lady<!-- --></div>
  <div class="profile-username">@lady</div>
  <div class="profile-tagline">“Hello world”</div>
  <div class="profile-oshi-mark">♥</div>
  <div class="mood-text">sleepy</div>
  <img class="user-avatar profile-avatar" src="https://cdn.example.com/avatar.png" alt="Lady">
  <div class="profile-online-status">Online now</div>
  <div class="profile-boop-stats">42 boops received · You've booped 3x</div>

  <div class="card"><div class="card-header hearted"><span>Lady's Top 8</span></div><div class="card-body">
    <div class="friends-grid">
      <a class="friend-item" href="/mika"><img src="https://cdn.example.com/mika.png" alt="Mika"><span class="friend-name">Mika</span></a>
      <a class="friend-item" href="/rin"><img src="https://cdn.example.com/rin.png" alt="Rin"></a>
    </div>
  </div></div>

  <div class="card"><div class="card-header hearted"><span>Photos</span></div><div class="card-body">
    <a href="/lady/photos/1"><div style="background: url('https://cdn.example.com/a1.jpg') center/cover"></div><div style="font-weight: 600">Summer</div><div>12 photos</div></a>
  </div></div>

  <div class="card"><div class="card-header hearted"><span>Groups</span></div><div class="card-body">
    <a href="/groups/cats"><div style="background:url(https://cdn.example.com/g1.jpg) center/cover"></div><div style="font-weight:600">Cats</div><div>7 members</div></a>
    <a href="/groups/top">Edit Top Groups</a>
  </div></div>

  <div class="card"><div class="card-header"><span>Collab Schedule</span></div><div class="card-body">
    <table><thead><tr><th></th><th>12a</th></tr></thead><tbody>
    <tr><td>MO</td><td style="background:var(--vs-blue)"></td><td style="background:var(--vs-bg-muted)"></td></tr>
    <tr><td>TU</td><td style="background:var(--vs-bg-muted)"></td><td style="background:var(--vs-blue)"></td></tr>
    </tbody></table>
    <span style="border-radius:3px">Singing</span><span style="border-radius: 3px">Gaming</span>
    <p><span data-lexical-text="true">Ping me anytime</span></p>
  </div></div>

  <div class="card"><div class="card-header"><span>Details</span></div><div class="card-body"><table>
    <tr><td>Generation</td><td><span title="5 invites from founding">Gen <!-- -->2</span></td></tr>
    <tr><td>Friends</td><td><a href="/lady/friends">17</a></td></tr>
    <tr><td>Comments</td><td><a href="#comments">4</a></td></tr>
    <tr><td>Affiliation</td><td>Indie</td></tr>
  </table></div></div>

  <div class="card"><div class="card-header"><span>Badges</span></div><div class="card-body"><div style="display:flex">
    <div title="Early Bird" style="width:32px"><svg viewBox="0 0 1 1"><circle r="1"/></svg></div>
  </div></div></div>

  <div class="card"><div class="card-header"><span>Social Links</span></div><div class="card-body"><div class="social-links-list">
    <a href="https://x.com/lady" class="social-link-item"><span class="social-link-platform">X</span><span class="social-link-name">@lady</span></a>
    <a href="https://twitch.tv/lady" class="social-link-item"><span class="social-link-platform">Twitch</span></a>
  </div></div></div>

  <div class="card"><div class="card-header"><span>Avatar Info</span></div><div class="card-body"><table><tr><td>Model</td><td>2d</td></tr></table></div></div>

  <div class="card"><div class="card-header"><span>Lore</span></div><div class="card-body"><p>Born in <b>the</b> void.</p></div></div>

  <div class="card"><div class="card-header"><span>Blurbs</span></div><div class="card-body">
    <h4>About Me</h4><div class="blurb-content"><span data-lexical-text="true">I like tea.</span></div>
    <h4>Who I'd Like to Meet</h4><div class="blurb-content"><span data-lexical-text="true">Everyone</span></div>
  </div></div>

  <div class="card"><div class="card-header"><span>Interests</span></div><div class="card-body">
    <div class="interest-section"><b>Music:</b><div class="interest-content"><span data-lexical-text="true">City pop</span></div></div>
    <div class="interest-section"><b>Games:</b><div class="interest-content">Tetris, Celeste</div></div>
  </div></div>

  <div class="card"><div class="card-header"><span>Profile Song</span></div><div class="card-body"><audio controls src="https://cdn.example.com/song.mp3?v=2"></audio></div></div>

  <div class="card"><div class="card-header"><span>Friend Comments</span><a href="/lady/comments">View All (<!-- -->4<!-- -->)</a></div><div class="card-body">
    <div class="profile-comment"><img class="user-avatar comment-avatar" src="https://cdn.example.com/c1.png"><div class="comment-content"><div class="comment-meta"><a class="comment-author-name" href="/mika">Mika</a><span class="comment-time">2 days<!-- --> ago</span></div><div class="comment-body"><span data-lexical-text="true">Hi!</span></div><div style="margin-top:8px;margin-left:10px;padding:8px"><div><a style="font-weight:600" href="/lady">Lady</a><span style="font-size:9px"> 1 day ago</span></div><div><span data-lexical-text="true">Hello back</span></div></div><div class="comment-actions"><a>Reply</a></div></div></div>
    <div class="profile-comment"><img src="https://cdn.example.com/c2.png" class="user-avatar comment-avatar"><div class="comment-content"><div class="comment-meta"><a href="/rin" class="comment-author-name">Rin</a><span class="comment-time">3 days ago</span></div><div class="comment-body"><p>Nice page</p></div></div></div>
  </div></div>
</div>
</body></html>
"""

TEMPLATE_HTML = """<div class="profile-page profile-custom-css theme-dark">
   <div class="profile-display-name">Display Name</div>
   <div class="profile-username">@username</div>
   <div class="profile-tagline">"Headline"</div>
   <div class="profile-oshi-mark">X</div>
   <div class="mood-text">Mood</div>
   <img src="data:image/svg+xml;base64,AAA" style="width:100px" alt="Username">
   <div class="profile-online-status">Last online just now</div>
   <div class="profile-boop-stats">14 boops received · You've booped 9x</div>
   <a href="https://myoshi.co/username">myoshi.co/username</a>
               <div class="profile-right">
                  <div class="card">
                     <div class="card-header hearted"><span>Username's Top 8</span></div>
                     <div class="card-body">
                        <div class="friends-grid">
                           <a class="friend-item" href="/placeholder-friend"><span class="friend-name">Friend</span></a>
                        </div>
                     </div>
                  </div>

                  <!-- ==================== Photos ==================== -->
                  <div class="card">
                     <div class="card-header hearted"><span>Photos</span></div>
                     <div class="card-body">
                        <p>No albums</p>
                     </div>
                  </div>

                  <!-- ==================== Groups ==================== -->
                  <div class="card">
                     <div class="card-header"><span>Details</span></div>
                     <div class="card-body"><table>
                        <tr><th>Generation</th><td><span title="N invites from founding">Gen 1</span></td></tr>
                        <tr><th>Friends</th><td><a href="/username/friends">0</a></td></tr>
                        <tr><th>Comments</th><td><a href="#comments">0</a></td></tr>
                        <tr><th>Affiliation</th><td>Affiliation</td></tr>
                     </table></div>
                  </div>
                  <div class="card">
                     <div class="card-body">
                        <div class="interest-content">Genre, Artist, Album</div>
                        <div class="interest-content">Game1, Game2</div>
                        <div class="interest-content">Book1, Book2</div>
                        <div class="blurb-content profile-custom-html"><p>old custom</p></div>
                        <audio src="about:blank"></audio>
                     </div>
                  </div>
                  <div class="card">
                     <div class="card-body">
                        <div class="comment-form">
                           <textarea placeholder="Leave a comment for Username..."></textarea>
                           <button>Post Comment</button>
                        </div>
                        <div class="profile-comment">old comment</div>
                     </div>
                  </div>
               </div><!-- /profile-right -->
</div>
"""


@pytest.fixture
def source_html() -> str:
    return SOURCE_HTML


@pytest.fixture
def template_html() -> str:
    return TEMPLATE_HTML


@pytest.fixture
def profile_dir(tmp_path: Path) -> Path:
    """Folder profilu z szablonem, źródłem i custom.html."""
    (tmp_path / ".tools").mkdir()
    (tmp_path / "profile.html").write_text(TEMPLATE_HTML, encoding="utf-8")
    (tmp_path / ".tools" / "source.html").write_text(SOURCE_HTML, encoding="utf-8")
    (tmp_path / "custom.html").write_text("<b>mine</b>", encoding="utf-8")
    return tmp_path
