from salestax.cli.main import main

raise SystemExit(main())
