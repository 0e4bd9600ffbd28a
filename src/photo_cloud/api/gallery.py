"""Browser client for the gallery API."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["ui"])


@router.get("/", response_class=HTMLResponse)
async def gallery_ui() -> HTMLResponse:
    """Single-page gallery UI that consumes the JSON API."""
    return HTMLResponse(_GALLERY_UI_HTML)


_GALLERY_UI_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>PhotoCloud</title>
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 2rem;
             background: #111827; color: #e5e7eb; }
      h1, h2 { color: #fff; }
      .row { margin-bottom: 1rem; }
      .hidden { display: none; }
      input { padding: 0.4rem 0.6rem; width: 280px; }
      button { padding: 0.4rem 0.8rem; margin-right: 0.5rem; }
      .error { color: #f87171; }
      .grid { display: grid; grid-template-columns: repeat(auto-fill, minmax(220px, 1fr));
              gap: 1rem; }
      .card { background: #1f2937; border-radius: 8px; overflow: hidden; }
      .card img { width: 100%; height: 200px; object-fit: cover; display: block; }
      .card p { margin: 0.5rem; }
    </style>
  </head>
  <body>
    <h1>PhotoCloud</h1>
    <div class="row">
      <button onclick="showPublic()">Public gallery</button>
      <button id="mine-btn" class="hidden" onclick="showMine()">My gallery</button>
      <button id="logout-btn" class="hidden" onclick="logout()">Logout</button>
    </div>
    <p id="error" class="error"></p>

    <section id="auth">
      <h2 id="auth-title">Login</h2>
      <form onsubmit="submitAuth(event)">
        <div class="row"><input id="username" placeholder="Username" required /></div>
        <div class="row">
          <input id="password" type="password" placeholder="Password" required />
        </div>
        <button type="submit" id="auth-submit">Login</button>
        <button type="button" onclick="toggleAuth()" id="auth-toggle">
          Need an account? Register
        </button>
      </form>
    </section>

    <section id="upload" class="hidden">
      <h2>Upload a new photo</h2>
      <form onsubmit="submitUpload(event)">
        <div class="row"><input id="title" placeholder="Photo title" required /></div>
        <div class="row"><input id="image" type="file" accept="image/*" required /></div>
        <button type="submit" id="upload-submit">Upload</button>
      </form>
    </section>

    <h2 id="gallery-title">Public gallery</h2>
    <div id="gallery" class="grid"></div>

    <script>
      let token = localStorage.getItem('token');
      let isLogin = true;
      let view = 'public';

      function setError(text) {
        document.getElementById('error').textContent = text || '';
      }

      function refreshChrome() {
        const signedIn = Boolean(token);
        document.getElementById('auth').classList.toggle('hidden', signedIn);
        document.getElementById('upload').classList.toggle('hidden', !signedIn);
        document.getElementById('mine-btn').classList.toggle('hidden', !signedIn);
        document.getElementById('logout-btn').classList.toggle('hidden', !signedIn);
      }

      function toggleAuth() {
        isLogin = !isLogin;
        const label = isLogin ? 'Login' : 'Register';
        document.getElementById('auth-title').textContent = label;
        document.getElementById('auth-submit').textContent = label;
        document.getElementById('auth-toggle').textContent = isLogin
          ? 'Need an account? Register' : 'Have an account? Login';
      }

      async function api(path, options = {}) {
        const headers = Object.assign({}, options.headers || {});
        if (token) { headers['x-auth-token'] = token; }
        const res = await fetch(path, Object.assign({}, options, { headers }));
        const body = await res.json().catch(() => ({}));
        if (!res.ok) { throw new Error(body.msg || 'An error occurred'); }
        return body;
      }

      async function submitAuth(event) {
        event.preventDefault();
        setError('');
        const path = isLogin ? '/api/auth/login' : '/api/auth/register';
        try {
          const data = await api(path, {
            method: 'POST',
            headers: { 'Content-Type': 'application/json' },
            body: JSON.stringify({
              username: document.getElementById('username').value,
              password: document.getElementById('password').value,
            }),
          });
          token = data.token;
          localStorage.setItem('token', token);
          refreshChrome();
          showMine();
        } catch (err) {
          setError(err.message);
        }
      }

      function logout() {
        localStorage.removeItem('token');
        token = null;
        refreshChrome();
        showPublic();
      }

      async function submitUpload(event) {
        event.preventDefault();
        setError('');
        const button = document.getElementById('upload-submit');
        const form = new FormData();
        form.append('title', document.getElementById('title').value);
        form.append('image', document.getElementById('image').files[0]);
        button.disabled = true;
        button.textContent = 'Uploading...';
        try {
          await api('/api/photos/upload', { method: 'POST', body: form });
          event.target.reset();
          showMine();
        } catch (err) {
          setError('Upload failed. Please try again.');
        } finally {
          button.disabled = false;
          button.textContent = 'Upload';
        }
      }

      async function deletePhoto(id) {
        if (!window.confirm('Are you sure you want to delete this photo?')) { return; }
        try {
          await api('/api/photos/' + id, { method: 'DELETE' });
          view === 'mine' ? showMine() : showPublic();
        } catch (err) {
          setError('Failed to delete photo.');
        }
      }

      function render(photos, owned) {
        const gallery = document.getElementById('gallery');
        gallery.replaceChildren();
        if (!photos.length) {
          const empty = document.createElement('p');
          empty.textContent = owned
            ? 'Your gallery is empty. Upload your first photo!'
            : 'No photos yet.';
          gallery.appendChild(empty);
          return;
        }
        for (const photo of photos) {
          const card = document.createElement('div');
          card.className = 'card';
          const img = document.createElement('img');
          img.src = photo.image_url;
          img.alt = photo.title;
          const caption = document.createElement('p');
          caption.textContent = photo.title;
          card.append(img, caption);
          if (owned) {
            const remove = document.createElement('button');
            remove.textContent = 'Delete';
            remove.onclick = () => deletePhoto(photo.id);
            card.appendChild(remove);
          }
          gallery.appendChild(card);
        }
      }

      async function showPublic() {
        view = 'public';
        document.getElementById('gallery-title').textContent = 'Public gallery';
        try {
          render(await api('/api/photos/public'), false);
        } catch (err) {
          setError('Could not fetch photos.');
        }
      }

      async function showMine() {
        view = 'mine';
        document.getElementById('gallery-title').textContent = 'Your gallery';
        try {
          render(await api('/api/photos'), true);
        } catch (err) {
          setError('Could not fetch photos.');
        }
      }

      refreshChrome();
      token ? showMine() : showPublic();
    </script>
  </body>
</html>
"""
