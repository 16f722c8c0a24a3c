from __future__ import annotations

# ruff: noqa: E501
import json


def render_index_html(ws_path: str) -> str:
    return f"""
<!doctype html>
<html>
  <head><meta charset="utf-8" /><title>slide-relay</title></head>
  <body style="font-family: ui-sans-serif, system-ui, -apple-system; background: #0a0a0a; color: #e6edf3;">
    <h1>Presentation Server</h1>
    <p>Server is running!</p>
    <p><a href="/control" style="color:#4ecdc4">Remote Control Interface</a></p>
    <p>WebSocket endpoint: <code>{ws_path}</code></p>
  </body>
</html>
"""


def render_control_html(ws_path: str) -> str:
    """
    Remote-control page (single page app).

    The page is just another peer: it sends `command` frames and renders `state` frames.
    """
    return f"""
<!doctype html>
<html>
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width,initial-scale=1" />
    <title>Presentation Remote Control</title>
    <style>
      * {{ margin: 0; padding: 0; box-sizing: border-box; }}
      body {{ font-family: ui-sans-serif, system-ui, -apple-system; background: #0a0a0a; color: #fff; padding: 2rem; min-height: 100vh; }}
      .container {{ max-width: 600px; margin: 0 auto; text-align: center; }}
      h1 {{ font-size: 2rem; margin-bottom: 2rem; color: #4ecdc4; }}
      .status {{ background: rgba(255,255,255,0.1); padding: 1rem; border-radius: 10px; margin-bottom: 2rem; }}
      .controls {{ display: grid; grid-template-columns: repeat(auto-fit, minmax(150px, 1fr)); gap: 1rem; margin-bottom: 2rem; }}
      .btn {{ background: linear-gradient(45deg, #ff6b6b, #4ecdc4); border: none; color: #fff; padding: 1rem 2rem; border-radius: 10px; cursor: pointer; font-size: 1rem; font-weight: bold; }}
      .slide-nav {{ display: flex; align-items: center; justify-content: center; gap: 1rem; margin-bottom: 2rem; }}
      .slide-input {{ background: rgba(255,255,255,0.1); border: 1px solid rgba(255,255,255,0.3); color: #fff; padding: 0.5rem; border-radius: 5px; width: 80px; text-align: center; }}
      .connection-status {{ padding: 0.5rem; border-radius: 5px; margin-bottom: 1rem; }}
      .connected {{ background: rgba(78,205,196,0.2); }}
      .disconnected {{ background: rgba(255,107,107,0.2); }}
    </style>
  </head>
  <body>
    <div class="container">
      <h1>Presentation Remote Control</h1>
      <div class="connection-status" id="connectionStatus">Connecting...</div>
      <div class="status">
        <div>Current Slide: <span id="currentSlide">1</span> / <span id="totalSlides">10</span></div>
        <div>Auto Mode: <span id="autoMode">Off</span></div>
      </div>
      <div class="slide-nav">
        <button class="btn" onclick="sendCommand('previous')">&larr; Previous</button>
        <input type="number" class="slide-input" id="slideInput" min="1" value="1">
        <button class="btn" onclick="goToSlide()">Go</button>
        <button class="btn" onclick="sendCommand('next')">Next &rarr;</button>
      </div>
      <div class="controls">
        <button class="btn" onclick="sendCommand('play_timeline')">Play Timeline</button>
        <button class="btn" onclick="sendCommand('demonstrate_easing')">Demo Easing</button>
        <button class="btn" onclick="sendCommand('trigger_finale')">Finale</button>
        <button class="btn" onclick="sendCommand('toggle_auto')">Toggle Auto</button>
        <button class="btn" onclick="sendCommand('fullscreen')">Fullscreen</button>
        <button class="btn" onclick="sendCommand('reset')">Reset</button>
      </div>
    </div>
    <script>
      const wsPath = {json.dumps(ws_path)};
      let ws = null;

      function wsUrl() {{
        const proto = (location.protocol === "https:") ? "wss" : "ws";
        return `${{proto}}://${{location.host}}${{wsPath}}`;
      }}

      function connect() {{
        ws = new WebSocket(wsUrl());
        ws.onopen = () => setConnection("Connected", true);
        ws.onclose = () => {{
          setConnection("Disconnected", false);
          setTimeout(connect, 3000);
        }};
        ws.onerror = () => setConnection("Connection Error", false);
        ws.onmessage = (ev) => {{
          let msg;
          try {{ msg = JSON.parse(ev.data); }} catch {{ return; }}
          if (msg.type === "state") updateStatus(msg);
        }};
      }}

      function sendCommand(command, params = null) {{
        if (!ws || ws.readyState !== WebSocket.OPEN) return;
        ws.send(JSON.stringify({{ type: "command", command, params, timestamp: Date.now() }}));
      }}

      function goToSlide() {{
        sendCommand("goto", parseInt(document.getElementById("slideInput").value, 10));
      }}

      function updateStatus(s) {{
        document.getElementById("currentSlide").textContent = s.currentSlide || 1;
        document.getElementById("totalSlides").textContent = s.totalSlides || 10;
        document.getElementById("autoMode").textContent = s.isAutoMode ? "On" : "Off";
        const input = document.getElementById("slideInput");
        input.value = s.currentSlide || 1;
        if (s.totalSlides) input.max = s.totalSlides;
      }}

      function setConnection(text, ok) {{
        const el = document.getElementById("connectionStatus");
        el.textContent = text;
        el.className = "connection-status " + (ok ? "connected" : "disconnected");
      }}

      document.addEventListener("keydown", (e) => {{
        if (e.target.tagName === "INPUT") return;
        switch (e.key) {{
          case "ArrowLeft": sendCommand("previous"); break;
          case "ArrowRight":
          case " ": e.preventDefault(); sendCommand("next"); break;
          case "f": sendCommand("fullscreen"); break;
          case "r": sendCommand("reset"); break;
        }}
      }});

      connect();
    </script>
  </body>
</html>
"""
