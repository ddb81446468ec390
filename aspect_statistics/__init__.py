"""
Circular-statistics package comparing pine and fir slope-aspect distributions.

Modules:
    config            – shared constants (paths, input columns, plot settings)
    loading           – read the zone table and drop invalid rows
    expansion         – weight aspects by tree counts, degrees -> bearings
    watson_test       – Watson U² two-sample test + result extraction
    descriptive_stats – circular mean, concentration, circular SD per species
    plots             – circular scatter, rose diagrams, aspect histograms
    run_all           – orchestrator: run the comparison + save report
"""
