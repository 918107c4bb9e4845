import json

try:
    from streamlit_javascript import st_javascript
except Exception:
    st_javascript = None

try:
    import streamlit as st  # type: ignore
except Exception:  # pragma: no cover
    st = None

LOCALSTORAGE_KEY = "preferredLanguage"
_JS_LANG_KEY = "improv_browser_lang_js"
_JS_SAVED_LANG_KEY = "improv_saved_lang_js"
_JS_WIDTH_KEY = "improv_viewport_width_js"
_JS_TITLE_KEY = "improv_page_title_js"


def _run_js(code: str, key: str | None = None):
    """Evaluate `code` in the browser; None when the bridge is unavailable."""
    if st_javascript is None:
        return None
    try:
        if key is None:
            val = st_javascript(code)
        else:
            val = st_javascript(code, key=key)
    except Exception:
        return None
    # The component returns 0 until the frontend has mounted.
    if val == 0 or (isinstance(val, str) and val.lower() in ("null", "undefined", "")):
        return None
    return val


def _js_localstorage_get() -> str:
    return (
        "(() => {"
        f"const k = {json.dumps(LOCALSTORAGE_KEY)};"
        "try { return window.localStorage.getItem(k); } catch (e) { return null; }"
        "})()"
    )


def _js_localstorage_set(val: str) -> str:
    # Set only when different, to minimize churn.
    return (
        "(() => {"
        f"const k = {json.dumps(LOCALSTORAGE_KEY)};"
        f"const v = {json.dumps(val)};"
        "try {"
        "  const cur = window.localStorage.getItem(k);"
        "  if (cur !== v) window.localStorage.setItem(k, v);"
        "} catch (e) {}"
        "return v;"
        "})()"
    )


def get_query_param(key: str) -> str | None:
    """Best-effort query param getter."""
    if st is None:
        return None
    try:
        qp = st.query_params
        val = qp.get(key)
        if isinstance(val, list):
            return str(val[-1]) if val else None
        if val is None:
            return None
        return str(val)
    except Exception:
        return None


def set_query_param(key: str, value: str) -> None:
    """Best-effort query param setter that keeps the other params."""
    if st is None:
        return
    try:
        st.query_params[key] = str(value)
        return
    except Exception:
        pass

    # Hosted contexts that refuse the server-side update: set it client-side.
    _run_js(
        "(() => {"
        "try {"
        "  const u = new URL(window.parent.location.href);"
        f"  u.searchParams.set({json.dumps(key)}, {json.dumps(value)});"
        "  window.parent.history.replaceState({}, '', u.toString());"
        "} catch (e) {}"
        "return null;"
        "})()"
    )


def get_saved_language() -> str | None:
    val = _run_js(_js_localstorage_get(), key=_JS_SAVED_LANG_KEY)
    return val if isinstance(val, str) else None


def save_language(lang: str) -> None:
    _run_js(_js_localstorage_set(lang))


def get_browser_language() -> str | None:
    val = _run_js("navigator.language", key=_JS_LANG_KEY)
    return val if isinstance(val, str) else None


def get_viewport_width() -> float | None:
    """Client width of the page in CSS pixels, or None if not known yet."""
    val = _run_js(
        "window.parent.document.documentElement.clientWidth",
        key=_JS_WIDTH_KEY,
    )
    try:
        return float(val) if val is not None else None
    except (TypeError, ValueError):
        return None


def set_page_title(title: str) -> None:
    """Retitle the browser tab; set_page_config only runs once per page."""
    if not title:
        return
    _run_js(
        "(() => {"
        f"window.parent.document.title = {json.dumps(title)};"
        "return null;"
        "})()",
        key=_JS_TITLE_KEY,
    )
