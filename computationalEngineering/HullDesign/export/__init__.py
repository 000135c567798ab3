# -- Export Subpackage -- #

'''
STL export of the hull shell and motor mount.
'''

from computationalEngineering.HullDesign.export.stlExporter import StlExporter
