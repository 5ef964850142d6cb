# ui/encryption_page.py
from __future__ import annotations
import json
import logging
import streamlit as st
import streamlit.components.v1 as components

from core.config import load_config
from core.errors import ConfigurationError, EntropySourceError
from core.export_utils import to_csv_bytes
from core.password_utils import (
    GenerationRequest,
    build_universe,
    entropy_bits,
    entropy_label,
    generate_batch,
)
from core.strength_utils import assess_strength

logger = logging.getLogger(__name__)

_BADGE = {
    "Very Strong": "#16a34a",
    "Strong": "#2563eb",
    "Medium": "#d97706",
    "Weak": "#dc2626",
}


def render():
    cfg = load_config()
    st.subheader("🔐 Password Generator")

    colL, colR = st.columns([3, 2])
    with colL:
        max_len = max(8, cfg.max_length)
        length = st.slider("Password length", 8, max_len, min(max(cfg.default_length, 8), max_len), 1)
        count  = st.number_input("Quantity", min_value=1, max_value=cfg.max_count, value=min(5, cfg.max_count), step=1)
        show_plain = st.checkbox("Show characters (unmasked)", value=False)
    with colR:
        st.markdown("**Character sets**")
        use_upper   = st.checkbox("A–Z", value=True)
        use_lower   = st.checkbox("a–z", value=True)
        use_digits  = st.checkbox("0–9", value=True)
        use_special = st.checkbox("Symbols", value=True)
        special = st.text_input("Custom symbols (optional)", value="", placeholder=cfg.tables.special)

        st.markdown("**Rules**")
        exclude_ambiguous = st.checkbox("Exclude look-alike (0 O l I 1)", value=False)
        require_all       = st.checkbox("At least one from every set", value=True)

    gen = st.button("🎲 Generate", type="primary", use_container_width=True)

    if gen:
        request = GenerationRequest.from_flags(
            int(length),
            use_upper=use_upper,
            use_lower=use_lower,
            use_digits=use_digits,
            use_special=use_special,
            exclude_ambiguous=exclude_ambiguous,
            require_all=require_all,
            special_chars=special or None,
            count=int(count),
        )
        try:
            results = generate_batch(request, cfg)
        except ConfigurationError as e:
            st.error(str(e))
            return
        except EntropySourceError as e:
            logger.error("Generation aborted: %s", e)
            st.error(f"Generation error: {e}")
            return

        universe = build_universe(request.classes, exclude_ambiguous, cfg.with_special(request.special_chars))
        bits = entropy_bits(request.length, len(universe.combined))
        st.caption(
            f"Estimated entropy: **{bits:.1f} bits** — {entropy_label(bits)} "
            f"(alphabet ~{len(universe.combined)} chars)"
        )

        _render_table(results, show_plain)
        st.download_button(
            "⬇️ Download CSV",
            data=to_csv_bytes(results),
            file_name="passwords.csv",
            mime="text/csv",
        )

    st.divider()
    _strength_checker(special_set_for(cfg, special))


def special_set_for(cfg, custom: str) -> str:
    """Special set the generator and the checker both use; spaces in the custom field are kept."""
    return cfg.with_special(custom or None).tables.special


def _strength_checker(special: str) -> None:
    st.markdown("**Check a password**")
    pw = st.text_input("Password", type="password", key="strength_input")
    if not pw:
        return
    a = assess_strength(pw, special)
    color = _BADGE.get(a.label, "#6b7280")
    st.markdown(
        f"<span style='color:{color};font-weight:600'>{a.label}</span> (score {a.score})",
        unsafe_allow_html=True,
    )
    for tip in a.suggestions:
        st.write(f"- {tip}")


def _render_table(results, show_plain: bool) -> None:
    # Dữ liệu cho iframe
    pw_data = [
        {"plain": pw, "masked": ("•" * len(pw)), "label": a.label, "color": _BADGE.get(a.label, "#6b7280")}
        for pw, a in results
    ]
    frame_height = min(720, 160 + 36 * len(pw_data))

    components.html(
        f"""
<style>
  :root {{ color-scheme: light dark; }}
  .pw-shown {{ color: #111827; }}
  @media (prefers-color-scheme: dark) {{
    .pw-shown.pw-plain {{ color: #ef4444; }}
  }}
  table#pwtable {{ border-collapse: collapse; width: 100%; border: 1px solid #e5e7eb; }}
  thead tr {{ background: #f8fafc; }}
  td, th {{ padding: 6px 10px; }}
  @media (prefers-color-scheme: dark) {{
    table#pwtable {{ border-color: #374151; }}
    thead tr {{ background: #111827; color: #e5e7eb; }}
  }}
  button.cpy {{
    background:#2563eb; border:none; color:#fff; padding:6px 10px; border-radius:6px; cursor:pointer;
  }}
  #toggle {{
    padding:6px 10px; border:1px solid #d1d5db; border-radius:8px; cursor:pointer; background:#fff;
  }}
  @media (prefers-color-scheme: dark) {{
    #toggle {{ background:#0b0f19; border-color:#374151; color:#e5e7eb; }}
  }}
</style>

<div style="font-family: system-ui, -apple-system, Segoe UI, Roboto, sans-serif;">
  <div style="display:flex;gap:8px;align-items:center;margin:6px 0 10px;">
    <button id="toggle">{("🙈 Hide" if show_plain else "👁 Show")}</button>
    <span style="color:#6b7280;">Click để show/hide mật khẩu.</span>
  </div>

  <table id="pwtable">
    <thead>
      <tr>
        <th style="text-align:left;width:60px;">#</th>
        <th style="text-align:left;">Password</th>
        <th style="text-align:left;width:120px;">Strength</th>
        <th style="text-align:right;width:110px;"></th>
      </tr>
    </thead>
    <tbody id="pwbody"></tbody>
  </table>
</div>

<script>
const data = {json.dumps(pw_data)};
let showPlain = {str(bool(show_plain)).lower()};

const tbody = document.getElementById("pwbody");
const toggleBtn = document.getElementById("toggle");

function makeRow(idx, item) {{
  const tr = document.createElement("tr");

  const tdIdx = document.createElement("td");
  tdIdx.textContent = String(idx + 1);

  const tdPwd = document.createElement("td");
  tdPwd.style.fontFamily = "ui-monospace,Consolas,Monaco,monospace";
  const spanShown = document.createElement("span");
  spanShown.className = "pw-shown" + (showPlain ? " pw-plain" : "");
  spanShown.textContent = showPlain ? item.plain : item.masked;
  tdPwd.appendChild(spanShown);

  const tdLabel = document.createElement("td");
  tdLabel.textContent = item.label;
  tdLabel.style.color = item.color;
  tdLabel.style.fontWeight = "600";

  const tdBtn = document.createElement("td");
  tdBtn.style.textAlign = "right";
  const btn = document.createElement("button");
  btn.className = "cpy";
  btn.textContent = "Copy";
  btn.dataset.idx = String(idx);
  tdBtn.appendChild(btn);

  tr.appendChild(tdIdx);
  tr.appendChild(tdPwd);
  tr.appendChild(tdLabel);
  tr.appendChild(tdBtn);
  return tr;
}}

function renderRows() {{
  tbody.innerHTML = "";
  data.forEach((it, i) => tbody.appendChild(makeRow(i, it)));
  toggleBtn.textContent = showPlain ? "🙈 Hide" : "👁 Show";
}}
renderRows();

// Copy với fallback
function copyText(text) {{
  if (navigator.clipboard && window.isSecureContext) {{
    return navigator.clipboard.writeText(text);
  }}
  const ta = document.createElement('textarea');
  ta.value = text;
  ta.style.position = 'fixed';
  ta.style.opacity = '0';
  document.body.appendChild(ta);
  ta.focus();
  ta.select();
  try {{ document.execCommand('copy'); }}
  finally {{ document.body.removeChild(ta); }}
  return Promise.resolve();
}}

document.getElementById("pwtable").addEventListener("click", (e) => {{
  const btn = e.target.closest("button.cpy");
  if (!btn) return;
  const item = data[Number(btn.dataset.idx)];
  copyText(item ? item.plain : "").then(() => {{
    const old = btn.textContent;
    btn.textContent = "Copied";
    setTimeout(() => btn.textContent = old, 900);
  }}).catch(() => {{
    alert("Clipboard blocked by browser");
  }});
}});

toggleBtn.addEventListener("click", () => {{
  showPlain = !showPlain;
  renderRows();
}});
</script>
        """,
        height=frame_height,
    )
