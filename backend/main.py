"""Demo: two-material section with a hole — solve, derive regions, plot."""

from crosssection import (
    SectionAnalysis,
    SectionMaterial,
    SolutionSettings,
    hole_contour,
    outer_contour,
    section_figure,
    setup_logging,
)


def main():
    setup_logging()

    # ── Input ─────────────────────────────────────────────────────
    steel = SectionMaterial("Steel", id=1, elastic_modulus=200e3, poissons_ratio=0.3, yield_strength=355)
    timber = SectionMaterial("Timber", id=2, elastic_modulus=11e3, poissons_ratio=0.35, yield_strength=24)

    web = outer_contour([(0, 0), (100, 0), (100, 200), (0, 200)], timber)
    flange = outer_contour([(-50, 200), (150, 200), (150, 220), (-50, 220)], steel)
    hole = hole_contour([(40, 80), (60, 80), (60, 120), (40, 120)])

    settings = SolutionSettings(maximum_area=50.0, run_warping_analysis=True)

    # ── Analysis ──────────────────────────────────────────────────
    analysis = SectionAnalysis()
    ev = analysis.evaluate([web, flange], [hole], settings, run=True)

    print(ev.status)
    for d in ev.diagnostics:
        print(f"[{d.level}] {d.source} {d.message}")

    p = ev.properties
    print(f"Area      = {p.area:.2f}")
    print(f"Centroid  = ({p.cx:.3f}, {p.cy:.3f})")
    print(f"Torsion J = {p.j:.4g}")

    for group in ev.regions:
        area = sum(r.area for r in group.regions)
        print(f"Material {group.material_id}: {group.color}, region area {area:.2f}")

    print(f"Mesh: {len(ev.wireframe.points)} points, {len(ev.wireframe.edges)} edges")

    # ── Plot ──────────────────────────────────────────────────────
    section_figure(ev.regions, ev.wireframe, title="Timber web with steel flange").show()


if __name__ == "__main__":
    main()
