from sroc.cli import main

raise SystemExit(main())
