from krs_toolkit.cli import main

raise SystemExit(main())
