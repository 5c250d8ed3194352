import sys

from sectioncanvas.app.main import main

sys.exit(main())
