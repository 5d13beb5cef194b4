from src.harness.runner import main

raise SystemExit(main())
