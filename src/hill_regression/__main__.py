from hill_regression.cli import main

raise SystemExit(main())
