"""Single-page UI that drives the tracker API."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["ui"])


@router.get("/", response_class=HTMLResponse)
async def index() -> HTMLResponse:
    """Serve the tracker page."""
    return HTMLResponse(_INDEX_HTML)


_INDEX_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Grow Your Tree</title>
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 0;
             background: #ecfdf5; color: #1f2937; }
      main { max-width: 72rem; margin: 0 auto; padding: 1.5rem; }
      header { display: flex; justify-content: space-between; align-items: center; }
      .grid { display: grid; gap: 1rem; grid-template-columns: 2fr 1fr; }
      .card { background: #fff; border-radius: 1rem; padding: 1rem;
              box-shadow: 0 4px 14px rgba(0,0,0,0.06); margin-bottom: 1rem; }
      .plant { text-align: center; background: #d1fae5; }
      .plant .emoji { font-size: 3.5rem; }
      .stats { display: grid; grid-template-columns: repeat(2, 1fr); gap: 0.75rem; }
      .bar { height: 0.5rem; background: #e5e7eb; border-radius: 1rem; overflow: hidden; }
      .bar div { height: 0.5rem; background: #f59e0b; }
      .bar div.ok { background: #10b981; }
      .muted { color: #6b7280; font-size: 0.8rem; }
      button { padding: 0.4rem 0.8rem; border: 0; border-radius: 0.75rem;
               background: #059669; color: #fff; cursor: pointer; margin: 0.1rem; }
      button.secondary { background: #e5e7eb; color: #111827; }
      input, select, textarea { padding: 0.4rem 0.6rem; border: 1px solid #d1d5db;
                                border-radius: 0.75rem; }
      table { width: 100%; font-size: 0.9rem; border-collapse: collapse; }
      td, th { text-align: left; padding: 0.3rem; border-top: 1px solid #f3f4f6; }
      .banner { border-radius: 1rem; padding: 1rem; background: #fef3c7; }
      .banner.done { background: #059669; color: #fff; }
      .warning { background: #fee2e2; color: #991b1b; padding: 0.5rem 1rem;
                 border-radius: 0.75rem; margin: 0.5rem 0; }
      img.photo { max-height: 14rem; border-radius: 0.75rem; margin-top: 0.5rem; }
      @media (max-width: 48rem) { .grid { grid-template-columns: 1fr; } }
    </style>
  </head>
  <body>
    <main>
      <header>
        <div>
          <strong>🌳 Grow Your Tree</strong>
          <div class="muted">Daily health • study • hydration</div>
        </div>
        <div id="session"></div>
      </header>
      <div id="warning"></div>
      <div id="notice" class="muted"></div>
      <div class="grid">
        <section>
          <div class="card plant" id="plant"></div>
          <div class="card stats" id="macros"></div>
          <div class="card">
            <h3>Food &amp; Nutrition Logger</h3>
            <div class="muted" id="targets"></div>
            <select id="food-key"></select>
            <input id="food-grams" type="number" value="100" min="0" />
            <button onclick="addFood()">Add</button>
            <table id="foods"></table>
          </div>
          <div class="card">
            <h3>Daily Journal &amp; Picture</h3>
            <textarea id="journal" rows="6" style="width: 100%"
              placeholder="How did your day go? What did you learn?"
              onchange="send('PUT', '/api/journal', {text: this.value})"></textarea>
            <input type="file" accept="image/*" onchange="uploadPhoto(this.files[0])" />
            <div id="photo"></div>
          </div>
        </section>
        <aside>
          <div id="checklist"></div>
          <div class="card">
            <h3>Water Intake</h3>
            <div id="water"></div>
            <div id="water-buttons"></div>
          </div>
          <div class="card">
            <h3>Steps Goal</h3>
            <div id="steps"></div>
            <input id="steps-input" type="number" min="0"
              onchange="send('PUT', '/api/steps', {steps: Number(this.value || 0)})" />
            <button onclick="setStepsToTarget()">Set 10k</button>
          </div>
          <div id="banner" class="banner"></div>
        </aside>
      </div>
      <footer class="muted" style="text-align: center">Data saved locally</footer>
    </main>
    <script>
      let current = null;

      function esc(value) {
        const node = document.createElement('span');
        node.textContent = value == null ? '' : String(value);
        return node.innerHTML;
      }

      async function send(method, path, body, headers) {
        const options = { method, headers: headers || {} };
        if (body instanceof Blob) {
          options.body = body;
        } else if (body !== undefined) {
          options.headers['Content-Type'] = 'application/json';
          options.body = JSON.stringify(body);
        }
        const res = await fetch(path, options);
        const data = await res.json();
        if (!res.ok) {
          document.getElementById('notice').textContent =
            'Error: ' + (data.detail || res.status);
          return null;
        }
        document.getElementById('notice').textContent =
          data.transition ? data.transition.message : '';
        render(data.dashboard);
        return data;
      }

      function metricCard(metric) {
        return '<div><div class="muted">' + esc(metric.label) + '</div>' +
          '<div><strong>' + Math.round(metric.value) + ' ' + esc(metric.unit) +
          '</strong></div><div class="bar"><div class="' + (metric.met ? 'ok' : '') +
          '" style="width: ' + metric.percent + '%"></div></div>' +
          '<div class="muted">Target: ' + metric.target + ' ' + esc(metric.unit) +
          '</div></div>';
      }

      function render(d) {
        current = d;
        const session = document.getElementById('session');
        session.innerHTML = d.user !== null
          ? '<span class="muted">Hi, ' + esc(d.user) + '</span> ' +
            '<button onclick="send(\\'POST\\', \\'/api/day/next\\')">Next Day →</button>' +
            '<button class="secondary" onclick="send(\\'POST\\', ' +
            '\\'/api/session/logout\\')">Logout</button>'
          : '<input id="login-name" placeholder="Enter name or email" /> ' +
            '<button onclick="send(\\'POST\\', \\'/api/session/login\\', ' +
            '{name: document.getElementById(\\'login-name\\').value})">Login</button>';

        document.getElementById('warning').innerHTML = d.persistence_warning
          ? '<div class="warning">' + esc(d.persistence_warning) + '</div>' : '';

        document.getElementById('plant').innerHTML =
          '<div class="emoji">' + esc(d.plant.emoji) + '</div>' +
          '<div><strong>' + esc(d.plant.name) + '</strong></div>' +
          '<div class="muted">Streak: ' + d.plant.streak + ' days • Day ' +
          d.plant.day_index + '</div>';

        const byKey = {};
        d.metrics.forEach((m) => { byKey[m.key] = m; });
        document.getElementById('macros').innerHTML =
          ['protein', 'carbs', 'fat', 'calories'].map((k) => metricCard(byKey[k])).join('');
        document.getElementById('water').innerHTML = metricCard(byKey.water);
        document.getElementById('steps').innerHTML = metricCard(byKey.steps);
        document.getElementById('steps-input').value = byKey.steps.value;

        const t = d.targets;
        document.getElementById('targets').textContent = 'Targets: ' + t.protein_g +
          'g P • ' + t.carbs_g + 'g C • ' + t.fat_g + 'g F • ' + t.calories + ' kcal';

        const select = document.getElementById('food-key');
        if (!select.options.length) {
          select.innerHTML = d.food_options.map((f) =>
            '<option value="' + esc(f.key) + '">' + esc(f.label) + '</option>').join('');
        }

        const rows = d.foods.map((f) =>
          '<tr><td>' + esc(f.label) + '</td><td>' + f.grams + '</td><td>' +
          f.protein_g.toFixed(1) + '</td><td>' + f.carbs_g.toFixed(1) + '</td><td>' +
          f.fat_g.toFixed(1) + '</td><td>' + f.calories.toFixed(0) + '</td><td>' +
          '<button class="secondary" onclick="send(\\'DELETE\\', \\'/api/foods/log/' +
          f.id + '\\')">Remove</button></td></tr>').join('');
        document.getElementById('foods').innerHTML =
          '<tr><th>Food</th><th>Grams</th><th>P (g)</th><th>C (g)</th>' +
          '<th>F (g)</th><th>kcal</th><th></th></tr>' +
          (rows || '<tr><td colspan="7" class="muted">No foods added yet.</td></tr>') +
          '<tr><th>Totals</th><th>-</th><th>' + d.totals.protein_g.toFixed(1) +
          '</th><th>' + d.totals.carbs_g.toFixed(1) + '</th><th>' +
          d.totals.fat_g.toFixed(1) + '</th><th>' + d.totals.calories.toFixed(0) +
          '</th><th></th></tr>';

        document.getElementById('checklist').innerHTML = d.checklist.map((section) =>
          '<div class="card"><h3>' + esc(section.title) + '</h3>' +
          section.items.map((item) =>
            '<label style="display: block"><input type="checkbox" ' +
            (item.checked ? 'checked ' : '') +
            'onchange="send(\\'POST\\', \\'/api/checklist/' + item.item +
            '/toggle\\')" /> ' + esc(item.label) + '</label>').join('') +
          '</div>').join('');

        document.getElementById('water-buttons').innerHTML = d.water_presets_ml.map((ml) =>
          '<button class="' + (ml < 0 ? 'secondary' : '') +
          '" onclick="send(\\'POST\\', \\'/api/water\\', {delta_ml: ' + ml + '})">' +
          (ml > 0 ? '+' : '') + ml + ' ml</button>').join('');

        const journal = document.getElementById('journal');
        if (document.activeElement !== journal) journal.value = d.journal;
        document.getElementById('photo').innerHTML = d.photo
          ? '<img class="photo" src="' + esc(d.photo) + '" alt="pic" /><br />' +
            '<button class="secondary" onclick="send(\\'DELETE\\', \\'/api/photo\\')">' +
            'Remove picture</button>'
          : '';

        const banner = document.getElementById('banner');
        banner.className = d.all_done ? 'banner done' : 'banner';
        banner.textContent = d.banner;
      }

      function addFood() {
        send('POST', '/api/foods/log', {
          food_key: document.getElementById('food-key').value,
          grams: Number(document.getElementById('food-grams').value || 0),
        });
      }

      function setStepsToTarget() {
        send('PUT', '/api/steps', {steps: current.targets.steps});
      }

      function uploadPhoto(file) {
        if (!file) return;
        send('PUT', '/api/photo', file, {'Content-Type': file.type || 'image/jpeg'});
      }

      send('GET', '/api/state');
    </script>
  </body>
</html>
"""
