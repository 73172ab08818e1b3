import os
from typing import Any, Dict, List, Optional

from flask import Flask, jsonify, request

from bstree.render import render
from bstree.tree import BalancedBinarySearchTree

app = Flask(__name__)

# Single tree shared by all requests; run the dev server single-threaded.
tree = BalancedBinarySearchTree()

STATE: Dict[str, Any] = {"initial_keys": None, "seeded": False}

DEFAULT_INITIAL_KEYS = os.environ.get("BST_INITIAL_KEYS", "")

TRAVERSALS = {
    "level": "level_order",
    "pre": "pre_order",
    "in": "in_order",
    "post": "post_order",
}


def ok(data=None, **extra):
    payload = {"ok": True}
    if data is not None:
        payload["data"] = data
    payload.update(extra)
    return jsonify(payload)

def err(message: str, status: int = 400, **extra):
    payload = {"ok": False, "error": message}
    payload.update(extra)
    return jsonify(payload), status

def parse_key(raw: str) -> Optional[int]:
    """Return the integer key in raw, or None if it is not an integer."""
    s = (raw or "").strip()
    try:
        return int(s)
    except ValueError:
        return None

def parse_key_list(raw: str) -> List[int]:
    """Parse a comma-separated key list, skipping blanks and non-integers."""
    keys: List[int] = []
    for part in (raw or "").split(","):
        key = parse_key(part)
        if key is not None:
            keys.append(key)
    return keys

def summary() -> Dict[str, Any]:
    return {
        "size": len(tree),
        "height": tree.height(),
        "balanced": None if tree.is_empty() else tree.is_balanced(),
        "keys": list(tree),
    }

def warm_start(raw_keys: str = DEFAULT_INITIAL_KEYS) -> None:
    """Seed the shared tree from BST_INITIAL_KEYS."""
    global tree
    STATE["initial_keys"] = raw_keys

    keys = parse_key_list(raw_keys)
    if not keys:
        print("[warm_start] No initial keys provided; starting with an empty tree.")
        tree = BalancedBinarySearchTree()
        STATE["seeded"] = False
        return

    tree = BalancedBinarySearchTree.build(keys)
    STATE["seeded"] = True
    print(f"[warm_start] Tree built: {len(tree):,} keys, height {tree.height()}")


@app.get("/api/status")
def api_status():
    return ok({
        "initial_keys": STATE["initial_keys"],
        "seeded": STATE["seeded"],
        **summary(),
    })


@app.post("/api/tree/build")
def api_tree_build():
    global tree
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return err("keys list is required: {\"keys\": [...]}")
    keys = data.get("keys")
    if not isinstance(keys, list):
        return err("keys list is required: {\"keys\": [...]}")
    if not all(isinstance(k, int) and not isinstance(k, bool) for k in keys):
        return err("keys must be integers")

    tree = BalancedBinarySearchTree.build(keys)
    return ok(summary())

@app.get("/api/tree/find/<key>")
def api_tree_find(key: str):
    k = parse_key(key)
    if k is None:
        return err("key must be an integer")

    node = tree.find(k)
    if node is None:
        return err("key not found", 404)
    return ok({"key": node.key, "depth": tree.depth(node), "height": tree.height(node)})

@app.post("/api/tree/insert/<key>")
def api_tree_insert(key: str):
    k = parse_key(key)
    if k is None:
        return err("key must be an integer")

    existed = k in tree
    tree.insert(k)
    return ok({"inserted": not existed, **summary()})

@app.post("/api/tree/delete/<key>")
def api_tree_delete(key: str):
    k = parse_key(key)
    if k is None:
        return err("key must be an integer")

    existed = k in tree
    tree.delete(k)
    return ok({"deleted": existed, **summary()})


@app.get("/api/tree/traverse/<order>")
def api_tree_traverse(order: str):
    method = TRAVERSALS.get(order)
    if method is None:
        return err(f"order must be one of {sorted(TRAVERSALS)}")
    return ok({"order": order, "keys": [n.key for n in getattr(tree, method)()]})

@app.get("/api/tree/depth/<key>")
def api_tree_depth(key: str):
    k = parse_key(key)
    if k is None:
        return err("key must be an integer")

    node = tree.find(k)
    if node is None:
        return err("key not found", 404)
    return ok({"key": k, "depth": tree.depth(node)})

@app.post("/api/tree/rebalance")
def api_tree_rebalance():
    before = tree.height()
    tree.rebalance()
    return ok({"height_before": before, **summary()})

@app.get("/api/tree/diagram")
def api_tree_diagram():
    return ok({"diagram": render(tree)})


if __name__ == "__main__":
    warm_start()
    app.run(host="127.0.0.1", port=5000, debug=True, use_reloader=False, threaded=False)
