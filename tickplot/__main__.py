from tickplot.cli import main

raise SystemExit(main())
