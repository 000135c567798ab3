# -- Computational Engineering Package -- #

'''
Master package for the Computational Engineering toolkit.

Domain-specific sub-packages:
    - HullDesign: Parametric 3D-printable RC boat hull generation,
      hydrostatics, sectioning, and visualization

Sean Bowman [10/14/2026]
'''
