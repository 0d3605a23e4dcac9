from jinja2 import Environment, select_autoescape

from app.ui.highlighter import build_segments
from app.ui.state import Slot, ViewState

TYPE_LABELS = {
    "addition": "Addition",
    "deletion": "Deletion",
    "modification": "Modification",
}

PAGE_TEMPLATE = """<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>Document Comparison</title>
<style>
  body { font-family: sans-serif; margin: 0; padding: 1.5rem; background: #1e3a8a; }
  main { display: flex; gap: 1.5rem; max-width: 1400px; margin: 0 auto; }
  .panel { flex: 1.2; display: flex; flex-direction: column; gap: 1rem; min-width: 0; }
  .analysis { flex: 1; max-width: 28rem; }
  .card { background: rgba(255,255,255,.85); border-radius: .5rem; padding: 1.5rem; overflow: auto; height: 75vh; }
  .doc { white-space: pre-wrap; font-family: monospace; font-size: .875rem; word-break: break-word; margin: 0; }
  .plain { color: #6b7280; }
  .empty { color: #4b5563; text-align: center; }
  .hl { position: relative; padding: 0 .25rem; border-radius: .25rem; cursor: help; }
  .hl-addition { background: #dcfce7; color: #166534; }
  .hl-deletion { background: #fee2e2; color: #991b1b; }
  .hl-modification { background: #fef9c3; color: #854d0e; }
  .hl .tip { display: none; position: absolute; bottom: 100%; left: 50%; transform: translateX(-50%);
             width: 16rem; background: #111827; color: #fff; font-size: .75rem; border-radius: .25rem;
             padding: .5rem; z-index: 10; white-space: normal; }
  .hl:hover .tip { display: block; }
  .error { color: #ef4444; background: #fef2f2; padding: .75rem; border-radius: .5rem; }
  .diff { background: #fff; border: 1px solid #e5e7eb; border-radius: .5rem; padding: .75rem; margin-bottom: .75rem; font-size: .875rem; }
  .label-addition { color: #16a34a; } .label-deletion { color: #dc2626; } .label-modification { color: #ca8a04; }
  .toolbar { display: flex; gap: .5rem; align-items: center; }
  .filename { color: #fff; font-size: .875rem; }
</style>
</head>
<body>
<main>
{% for panel in panels %}
  <section class="panel" id="{{ panel.slot }}">
    <div class="toolbar">
      <form method="post" action="/documents/{{ panel.slot }}" enctype="multipart/form-data">
        <input type="file" name="file" accept=".txt,.pdf" onchange="this.form.submit()">
        <noscript><button type="submit">Upload</button></noscript>
      </form>
      {% if panel.document %}
      <span class="filename">{{ panel.document.name }}</span>
      <form method="post" action="/documents/{{ panel.slot }}/clear">
        <button type="submit" title="Remove document">&times;</button>
      </form>
      {% endif %}
    </div>
    <div class="card">
      {% if not panel.document %}
      <div class="empty">No document uploaded</div>
      {% elif panel.segments is none %}
      <pre class="doc plain">{{ panel.document.text }}</pre>
      {% else %}
      <pre class="doc">{% for seg in panel.segments %}{% if seg.highlighted %}<span class="hl {{ seg.css_class }}">{{ seg.text }}<span class="tip">{{ seg.tooltip }}</span></span>{% else %}<span class="plain">{{ seg.text }}</span>{% endif %}{% endfor %}</pre>
      {% endif %}
    </div>
  </section>
{% endfor %}
  <section class="panel analysis">
    <form method="post" action="/compare" onsubmit="this.querySelector('button').disabled = true; this.querySelector('button').textContent = 'Comparing...';">
      <button type="submit" {% if not state.can_compare %}disabled{% endif %}>Compare Documents</button>
    </form>
    <div class="card">
      {% if state.comparison or state.error %}<h3>Analysis</h3>{% endif %}
      {% if state.error %}<div class="error">{{ state.error }}</div>{% endif %}
      {% if state.comparison %}
      <h4>Summary</h4>
      <p>{{ state.comparison.summary }}</p>
      {% if state.comparison.impact_analysis %}
      <h4>Impact Analysis</h4>
      <p>{{ state.comparison.impact_analysis }}</p>
      {% endif %}
      <h4>Detailed Differences</h4>
      {% for diff in state.comparison.differences %}
      <div class="diff">
        <div class="label-{{ diff.type }}">{{ labels[diff.type] }}</div>
        <div><b>Content:</b> "{{ diff.content }}"</div>
        <div><b>Location:</b> {{ diff.location }}</div>
        <div><b>Significance:</b> {{ diff.significance }}</div>
      </div>
      {% endfor %}
      {% endif %}
    </div>
  </section>
</main>
</body>
</html>
"""

env = Environment(autoescape=select_autoescape(default_for_string=True))
template = env.from_string(PAGE_TEMPLATE)


def build_panel(state: ViewState, slot: Slot) -> dict:
    doc = state.document(slot)
    segments = None
    if doc is not None and state.comparison is not None:
        segments = build_segments(doc.text, state.comparison.differences, slot)
    return {"slot": slot.value, "document": doc, "segments": segments}


def render_page(state: ViewState) -> str:
    panels = [build_panel(state, slot) for slot in Slot]
    return template.render(state=state, panels=panels, labels=TYPE_LABELS)
