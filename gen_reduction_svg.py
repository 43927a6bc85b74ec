"""Generate an SVG of a planar support reduction.

Four points A-D with equal weights represent the target (0.75, 0.75).
Reduction removes one point and leaves a triangle containing the target.
Writes reduction.svg next to this script and prints the weight tables.
"""
import os, datetime

from hullgeom.types import WeightedPointSet
from hullgeom.geometry import poly_area, max_abs_diff
from hullgeom.svg import make_svg_transform, W, H
from caratheodory.pointset import uniform_point_set, target
from caratheodory.reduction import reduce_with_trace

# ============================================================
# Section 1: Scenario
# ============================================================
SCENARIO = {"A": (0.0, 0.0), "B": (2.0, 0.0), "C": (0.0, 2.0), "D": (1.0, 1.0)}

# ============================================================
# Section 2: Computation
# ============================================================
def compute_all(points: dict = SCENARIO) -> dict:
    """Reduce the uniform point set on *points*; return everything the renderer needs."""
    initial = uniform_point_set(points)
    trace = reduce_with_trace(initial)
    support = trace.support
    t0 = target(initial); t1 = target(support)
    tri = [support.points[k] for k in support.points]
    return {
        "initial": initial,
        "trace": trace,
        "support": support,
        "target": t1,
        "target_drift": max_abs_diff(t0, t1),
        "support_area": poly_area(tri) if len(tri) >= 3 else 0.0,
        "to_svg": make_svg_transform(list(initial.points.values())),
    }

# ============================================================
# Section 3: SVG Renderer
# ============================================================
def _weight_label(k: str, ps: WeightedPointSet) -> str:
    return f"{k} w={float(ps.weights[k]):.4f}" if k in ps.weights else f"{k} (removed)"

def render_svg(data: dict) -> str:
    """Full SVG document for the reduction in *data* (from compute_all)."""
    to_svg = data["to_svg"]; initial = data["initial"]; support = data["support"]
    lines = []
    lines.append(f'<svg xmlns="http://www.w3.org/2000/svg" width="{W}" height="{H}" viewBox="0 0 {W} {H}">')
    lines.append(f'<rect width="{W}" height="{H}" fill="white"/>')
    lines.append(f'<text x="{W/2}" y="30" text-anchor="middle" font-family="Arial" font-size="14"'
                 f' font-weight="bold">Support Reduction \u2014 {len(initial.points)} to {len(support.points)} points</text>')

    # Initial hull outline (dashed, input order)
    init_svg = " ".join(f"{to_svg(*p)[0]:.1f},{to_svg(*p)[1]:.1f}" for p in initial.points.values())
    lines.append(f'<polygon points="{init_svg}" fill="none" stroke="#999"'
                 f' stroke-width="0.8" stroke-dasharray="4,4"/>')

    # Reduced support
    sup_svg = " ".join(f"{to_svg(*p)[0]:.1f},{to_svg(*p)[1]:.1f}" for p in support.points.values())
    lines.append(f'<polygon points="{sup_svg}" fill="rgba(200,230,255,0.5)" stroke="#333" stroke-width="2.0"/>')

    # Vertex dots and labels
    for k, p in initial.points.items():
        sx, sy = to_svg(*p)
        kept = k in support.points
        color = "#d32f2f" if kept else "#999"
        fill = color if kept else "none"
        lines.append(f'<circle cx="{sx:.1f}" cy="{sy:.1f}" r="3.5" fill="{fill}" stroke="{color}" stroke-width="1"/>')
        lines.append(f'<text x="{sx+8:.1f}" y="{sy-6:.1f}" text-anchor="start" font-family="Arial"'
                     f' font-size="10" font-weight="bold" fill="{color}">{_weight_label(k, support)}</text>')

    # Target marker
    tx, ty = to_svg(*data["target"])
    lines.append(f'<line x1="{tx-5:.1f}" y1="{ty:.1f}" x2="{tx+5:.1f}" y2="{ty:.1f}" stroke="#1565C0" stroke-width="1.5"/>')
    lines.append(f'<line x1="{tx:.1f}" y1="{ty-5:.1f}" x2="{tx:.1f}" y2="{ty+5:.1f}" stroke="#1565C0" stroke-width="1.5"/>')
    tgt = ", ".join(f"{float(v):.4f}" for v in data["target"])
    lines.append(f'<text x="{tx+8:.1f}" y="{ty+14:.1f}" font-family="Arial" font-size="9"'
                 f' fill="#1565C0">target ({tgt})</text>')

    # Legend
    ly = 562
    lines.append(f'<line x1="40" y1="{ly+4}" x2="54" y2="{ly+4}" stroke="#999" stroke-width="0.8" stroke-dasharray="4,4"/>')
    lines.append(f'<text x="60" y="{ly+7}" font-family="Arial" font-size="8" fill="#999">Initial support (input order)</text>')
    ly += 12
    lines.append(f'<line x1="40" y1="{ly+4}" x2="54" y2="{ly+4}" stroke="#333" stroke-width="2.0"/>')
    lines.append(f'<text x="60" y="{ly+7}" font-family="Arial" font-size="8" fill="#333">'
                 f'Reduced support ({data["support_area"]:.4f} sq units)</text>')

    # Footer
    _now = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    lines.append(f'<text x="{W/2}" y="{H-2}" text-anchor="middle" font-family="Arial" font-size="7.5"'
                 f' fill="#999">Generated {_now}</text>')
    lines.append('</svg>')
    return "\n".join(lines)

# ============================================================
# Section 4: Report + Output (only when run directly)
# ============================================================
if __name__ == "__main__":
    data = compute_all()
    initial = data["initial"]; support = data["support"]; trace = data["trace"]

    print("=== INITIAL SUPPORT ===")
    for k, p in initial.points.items():
        print(f"  {k:<3s} ({p[0]:.4f}, {p[1]:.4f})  w={float(initial.weights[k]):.6f}")
    print(f"=== REDUCED SUPPORT ({trace.steps} pivot{'s' if trace.steps != 1 else ''}) ===")
    for k, p in support.points.items():
        print(f"  {k:<3s} ({p[0]:.4f}, {p[1]:.4f})  w={float(support.weights[k]):.6f}")
    print(f"  Removed: {', '.join(trace.removed) or '-'}")
    print(f"  Target drift: {data['target_drift']:.2e}")
    print(f"  Support area: {data['support_area']:.4f}")

    svg_path = os.path.join(os.path.dirname(os.path.abspath(__file__)), "reduction.svg")
    with open(svg_path, "w", encoding="utf-8") as f:
        f.write(render_svg(data))
    print(f"\nSVG written to reduction.svg")
