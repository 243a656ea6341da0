from logicalids.cli import main

raise SystemExit(main())
